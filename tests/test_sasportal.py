import datetime

import pytest
from googleapiclient.errors import HttpError

from googlerest.common import Empty, Operation
from googlerest.v1alpha1 import sasportal
from googlerest.v1alpha1.sasportal import (CreateSignedDeviceRequest, Deployment, Device,
                                           DeviceConfig, InstallationParams, MoveDeviceRequest,
                                           Node, Policy, ProdTtSasPortal, SetPolicyRequest,
                                           SignDeviceRequest)

from conftest import mock_http, ok, sent

DEVICE = {
    'name': 'customers/c1/devices/d1',
    'fccId': '2AG32MBS3100196N',
    'serialNumber': 'SN123',
    'state': 'REGISTERED',
    'activeConfig': {'category': 'DEVICE_CATEGORY_A', 'isSigned': True, 'updateTime': '2023-04-05T06:07:08Z',
                     'installationParams': {'latitude': 37.42, 'longitude': -122.08, 'height': 6.5,
                                            'heightType': 'HEIGHT_TYPE_AGL', 'indoorDeployment': True}},
    'grants': [{'grantId': 'g1', 'state': 'GRANT_STATE_AUTHORIZED', 'maxEirp': 30,
                'expireTime': '2023-05-05T00:00:00Z', 'lastHeartbeatTransmitExpireTime': '2023-04-05T06:08:00Z',
                'frequencyRange': {'lowFrequencyMhz': 3550, 'highFrequencyMhz': 3560}}],
    'currentChannels': [{'score': 0.9, 'frequencyRange': {'lowFrequencyMhz': 3600, 'highFrequencyMhz': 3610}}],
}

def test_device_create_and_get():
    http = mock_http(ok(DEVICE), ok(DEVICE))
    sas = ProdTtSasPortal(http=http)
    req = Device(fccId='2AG32MBS3100196N', serialNumber='SN123',
                 preloadedConfig=DeviceConfig(category='DEVICE_CATEGORY_A',
                                              installationParams=InstallationParams(latitude=37.42)))
    d = sas.customersDevicesCreate("customers/c1", req)
    method, path, query, body = sent(http)
    assert(method == "POST")
    assert(path == "/v1alpha1/customers/c1/devices")
    assert(body == {'fccId': '2AG32MBS3100196N', 'serialNumber': 'SN123',
                    'preloadedConfig': {'category': 'DEVICE_CATEGORY_A',
                                        'installationParams': {'latitude': 37.42}}})
    assert(d.activeConfig.updateTime == datetime.datetime(2023, 4, 5, 6, 7, 8, tzinfo=datetime.timezone.utc))
    assert(d.activeConfig.installationParams.indoorDeployment is True)
    assert(d.grants[0].expireTime.day == 5)
    assert(d.grants[0].frequencyRange.highFrequencyMhz == 3560)
    assert(d.currentChannels[0].frequencyRange.lowFrequencyMhz == 3600)
    assert(sas.nodesDevicesGet("nodes/n1/devices/d1") == d)
    assert(sent(http, 1)[0:2] == ("GET", "/v1alpha1/nodes/n1/devices/d1"))

def test_create_signed():
    http = mock_http(ok(DEVICE), ok(DEVICE))
    sas = ProdTtSasPortal(http=http)
    sas.customersDeploymentsDevicesCreateSigned("customers/c1/deployments/dep1",
                                                CreateSignedDeviceRequest(encodedDevice=b"\x00\x01\x02",
                                                                          installerId="cpi-1"))
    method, path, query, body = sent(http)
    assert(path == "/v1alpha1/customers/c1/deployments/dep1/devices:createSigned")
    assert(body == {'encodedDevice': 'AAEC', 'installerId': 'cpi-1'})
    sas.nodesDevicesUpdateSigned("nodes/n1/devices/d1",
                                 sasportal.UpdateSignedDeviceRequest(encodedDevice=b"", installerId="cpi-1"))
    method, path, query, body = sent(http, 1)
    assert(method == "PATCH")
    assert(path == "/v1alpha1/nodes/n1/devices/d1:updateSigned")
    assert(body == {'encodedDevice': '', 'installerId': 'cpi-1'})

def test_sign_and_move():
    http = mock_http(ok(), ok({'name': 'operations/move1', 'done': False}))
    sas = ProdTtSasPortal(http=http)
    r = sas.deploymentsDevicesSignDevice("deployments/dep1/devices/d1", SignDeviceRequest(device=Device(displayName='x')))
    assert(r == Empty())
    assert(sent(http)[1:] == ("/v1alpha1/deployments/dep1/devices/d1:signDevice", {}, {'device': {'displayName': 'x'}}))
    op = sas.customersDevicesMove("customers/c1/devices/d1", MoveDeviceRequest(destination="customers/c1/nodes/n2"))
    assert(isinstance(op, Operation))
    assert(sent(http, 1)[1:] == ("/v1alpha1/customers/c1/devices/d1:move", {}, {'destination': 'customers/c1/nodes/n2'}))

def test_lists_and_patch():
    http = mock_http(ok({'devices': [DEVICE], 'nextPageToken': 'n'}),
                     ok({'nodes': [{'name': 'nodes/n1/nodes/n2', 'displayName': 'Child'}]}),
                     ok({'deployments': [{'name': 'nodes/n1/deployments/dep', 'frns': ['0123456789']}]}),
                     ok({'name': 'customers/c1/nodes/n1', 'displayName': 'Renamed'}))
    sas = ProdTtSasPortal(http=http)
    devices = sas.nodesNodesDevicesList("nodes/n1/nodes/n2", filter="sn=SN123", pageSize=50)
    assert(devices.devices[0].serialNumber == 'SN123')
    assert(sent(http)[1:3] == ("/v1alpha1/nodes/n1/nodes/n2/devices", {'filter': 'sn=SN123', 'pageSize': '50'}))
    nodes = sas.nodesNodesNodesList("nodes/n1/nodes/n2")
    assert(isinstance(nodes.nodes[0], Node))
    assert(sent(http, 1)[1] == "/v1alpha1/nodes/n1/nodes/n2/nodes")
    deps = sas.nodesDeploymentsList("nodes/n1")
    assert(isinstance(deps.deployments[0], Deployment))
    assert(deps.deployments[0].frns == ['0123456789'])
    node = sas.customersNodesPatch("customers/c1/nodes/n1", Node(displayName='Renamed'), updateMask="displayName")
    assert(node.displayName == 'Renamed')
    assert(sent(http, 3)[0:3] == ("PATCH", "/v1alpha1/customers/c1/nodes/n1", {'updateMask': 'displayName'}))

def test_customers():
    http = mock_http(ok({'customers': [{'name': 'customers/c1', 'displayName': 'Acme', 'sasUserIds': ['u1']}]}),
                     ok({}))
    sas = ProdTtSasPortal(http=http)
    r = sas.customersList(pageSize=10)
    assert(r.customers[0].sasUserIds == ['u1'])
    assert(sent(http)[1:3] == ("/v1alpha1/customers", {'pageSize': '10'}))
    resp = sas.customersProvisionDeployment(sasportal.ProvisionDeploymentRequest(newDeploymentDisplayName='Lab'))
    assert(resp.errorMessage is None)
    assert(sent(http, 1)[1] == "/v1alpha1/customers:provisionDeployment")

def test_installer():
    http = mock_http(ok({'secret': 's3cr3t'}), ok({}))
    sas = ProdTtSasPortal(http=http)
    secret = sas.installerGenerateSecret(sasportal.GenerateSecretRequest())
    assert(secret.secret == 's3cr3t')
    assert(sent(http)[0:2] == ("POST", "/v1alpha1/installer:generateSecret"))
    sas.installerValidate(sasportal.ValidateInstallerRequest(installerId='cpi-1', secret=secret.secret,
                                                             encodedSecret='jwt'))
    assert(sent(http, 1)[1:] == ("/v1alpha1/installer:validate", {},
                                 {'encodedSecret': 'jwt', 'installerId': 'cpi-1', 'secret': 's3cr3t'}))

def test_policies():
    http = mock_http(ok({'assignments': [{'role': 'roles/owner', 'members': ['user:a@example.com']}],
                         'etag': 'AAEC'}),
                     ok({'etag': 'AAED'}),
                     ok({'permissions': ['sasportal.devices.get']}))
    sas = ProdTtSasPortal(http=http)
    policy = sas.policiesGet(sasportal.GetPolicyRequest(resource='customers/c1'))
    assert(isinstance(policy, Policy))
    assert(policy.etag == b"\x00\x01\x02")
    assert(policy.assignments[0].members == ['user:a@example.com'])
    updated = sas.policiesSet(SetPolicyRequest(resource='customers/c1', policy=policy))
    assert(updated.etag == b"\x00\x01\x03")
    assert(sent(http, 1)[3]['policy'] == {'assignments': [{'members': ['user:a@example.com'], 'role': 'roles/owner'}],
                                          'etag': 'AAEC'})
    perms = sas.policiesTest(sasportal.TestPermissionsRequest(resource='customers/c1',
                                                              permissions=['sasportal.devices.get',
                                                                           'sasportal.devices.delete']))
    assert(perms.permissions == ['sasportal.devices.get'])
    assert(sent(http, 2)[1] == "/v1alpha1/policies:test")

def test_permission_denied():
    http = mock_http(ok({'error': {'code': 403, 'message': 'The caller does not have permission',
                                   'status': 'PERMISSION_DENIED'}}, status='403'))
    sas = ProdTtSasPortal(http=http)
    with pytest.raises(HttpError) as e:
        sas.customersDeploymentsDelete("customers/c1/deployments/dep1")
    assert(e.value.status_code == 403)
    assert(sent(http)[0:2] == ("DELETE", "/v1alpha1/customers/c1/deployments/dep1"))

def test_missing_parent():
    sas = ProdTtSasPortal(http=mock_http())
    with pytest.raises(ValueError):
        sas.customersNodesCreate("", Node(displayName='x'))
