"""
SAS Portal API (testing environment)

Manage CBRS devices registered with the Spectrum Access System, the
deployments and nodes they are organized in, and who may access them.
Docs: https://developers.google.com/spectrum-access-system/
"""
from ...client import GoogleRestClient
from .resources import *

class ProdTtSasPortal(GoogleRestClient):
    """
    The same resources are reachable under customers/, nodes/ and
    deployments/ so many methods only differ in which name prefix they
    expect.  The ones that accept a parent take the full parent name,
    e.g. customers/123/deployments/456.
    """
    DEFAULT_BASE_URL = "https://prod-tt-sasportal.googleapis.com/"

    # customers

    def customersDeploymentsCreate(self, parent: str, req: Deployment) -> Deployment:
        return self._call("v1alpha1/{+parent}/deployments", "POST", Deployment, body=req, parent=parent)

    def customersDeploymentsDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def customersDeploymentsDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def customersDeploymentsDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def customersDeploymentsDevicesList(self, parent: str, filter: str|None = None,
                                        pageSize: int|None = None,
                                        pageToken: str|None = None) -> ListDevicesResponse:
        """
        param: filter: only 'sn=123454' or 'display_name=MyDevice' style, case insensitive
        """
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersDeploymentsGet(self, name: str) -> Deployment:
        return self._call("v1alpha1/{+name}", "GET", Deployment, name=name)

    def customersDeploymentsList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                                 pageToken: str|None = None) -> ListDeploymentsResponse:
        return self._call("v1alpha1/{+parent}/deployments", "GET", ListDeploymentsResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersDeploymentsMove(self, name: str, req: MoveDeploymentRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def customersDeploymentsPatch(self, name: str, req: Deployment,
                                  updateMask: str|list[str]|None = None) -> Deployment:
        return self._call("v1alpha1/{+name}", "PATCH", Deployment, body=req, name=name,
                          updateMask=updateMask)

    def customersDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def customersDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def customersDevicesDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def customersDevicesGet(self, name: str) -> Device:
        return self._call("v1alpha1/{+name}", "GET", Device, name=name)

    def customersDevicesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                             pageToken: str|None = None) -> ListDevicesResponse:
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersDevicesMove(self, name: str, req: MoveDeviceRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def customersDevicesPatch(self, name: str, req: Device,
                              updateMask: str|list[str]|None = None) -> Device:
        return self._call("v1alpha1/{+name}", "PATCH", Device, body=req, name=name,
                          updateMask=updateMask)

    def customersDevicesSignDevice(self, name: str, req: SignDeviceRequest) -> Empty:
        return self._call("v1alpha1/{+name}:signDevice", "POST", Empty, body=req, name=name)

    def customersDevicesUpdateSigned(self, name: str, req: UpdateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+name}:updateSigned", "PATCH", Device, body=req, name=name)

    def customersGet(self, name: str) -> Customer:
        return self._call("v1alpha1/{+name}", "GET", Customer, name=name)

    def customersList(self, pageSize: int|None = None, pageToken: str|None = None) -> ListCustomersResponse:
        """
        Customers the caller has access to.
        """
        return self._call("v1alpha1/customers", "GET", ListCustomersResponse,
                          pageSize=pageSize, pageToken=pageToken)

    def customersNodesCreate(self, parent: str, req: Node) -> Node:
        return self._call("v1alpha1/{+parent}/nodes", "POST", Node, body=req, parent=parent)

    def customersNodesDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def customersNodesDeploymentsCreate(self, parent: str, req: Deployment) -> Deployment:
        return self._call("v1alpha1/{+parent}/deployments", "POST", Deployment, body=req, parent=parent)

    def customersNodesDeploymentsList(self, parent: str, filter: str|None = None,
                                      pageSize: int|None = None,
                                      pageToken: str|None = None) -> ListDeploymentsResponse:
        return self._call("v1alpha1/{+parent}/deployments", "GET", ListDeploymentsResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersNodesDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def customersNodesDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def customersNodesDevicesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                                  pageToken: str|None = None) -> ListDevicesResponse:
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersNodesGet(self, name: str) -> Node:
        return self._call("v1alpha1/{+name}", "GET", Node, name=name)

    def customersNodesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                           pageToken: str|None = None) -> ListNodesResponse:
        return self._call("v1alpha1/{+parent}/nodes", "GET", ListNodesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersNodesMove(self, name: str, req: MoveNodeRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def customersNodesNodesCreate(self, parent: str, req: Node) -> Node:
        return self._call("v1alpha1/{+parent}/nodes", "POST", Node, body=req, parent=parent)

    def customersNodesNodesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                                pageToken: str|None = None) -> ListNodesResponse:
        return self._call("v1alpha1/{+parent}/nodes", "GET", ListNodesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def customersNodesPatch(self, name: str, req: Node, updateMask: str|list[str]|None = None) -> Node:
        return self._call("v1alpha1/{+name}", "PATCH", Node, body=req, name=name, updateMask=updateMask)

    def customersPatch(self, name: str, req: Customer, updateMask: str|list[str]|None = None) -> Customer:
        return self._call("v1alpha1/{+name}", "PATCH", Customer, body=req, name=name,
                          updateMask=updateMask)

    def customersProvisionDeployment(self, req: ProvisionDeploymentRequest) -> ProvisionDeploymentResponse:
        """
        Creates a new SAS deployment through the GCP workflow, and an
        organization if the caller doesn't have one.
        """
        return self._call("v1alpha1/customers:provisionDeployment", "POST",
                          ProvisionDeploymentResponse, body=req)

    # deployments

    def deploymentsDevicesDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def deploymentsDevicesGet(self, name: str) -> Device:
        return self._call("v1alpha1/{+name}", "GET", Device, name=name)

    def deploymentsDevicesMove(self, name: str, req: MoveDeviceRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def deploymentsDevicesPatch(self, name: str, req: Device,
                                updateMask: str|list[str]|None = None) -> Device:
        return self._call("v1alpha1/{+name}", "PATCH", Device, body=req, name=name,
                          updateMask=updateMask)

    def deploymentsDevicesSignDevice(self, name: str, req: SignDeviceRequest) -> Empty:
        return self._call("v1alpha1/{+name}:signDevice", "POST", Empty, body=req, name=name)

    def deploymentsDevicesUpdateSigned(self, name: str, req: UpdateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+name}:updateSigned", "PATCH", Device, body=req, name=name)

    def deploymentsGet(self, name: str) -> Deployment:
        return self._call("v1alpha1/{+name}", "GET", Deployment, name=name)

    # installer

    def installerGenerateSecret(self, req: GenerateSecretRequest) -> GenerateSecretResponse:
        """
        Generates a secret to be used with installerValidate().
        """
        return self._call("v1alpha1/installer:generateSecret", "POST", GenerateSecretResponse, body=req)

    def installerValidate(self, req: ValidateInstallerRequest) -> ValidateInstallerResponse:
        """
        Validates the identity of a Certified Professional Installer (CPI).
        """
        return self._call("v1alpha1/installer:validate", "POST", ValidateInstallerResponse, body=req)

    # nodes

    def nodesDeploymentsDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def nodesDeploymentsDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def nodesDeploymentsDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def nodesDeploymentsDevicesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                                    pageToken: str|None = None) -> ListDevicesResponse:
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesDeploymentsGet(self, name: str) -> Deployment:
        return self._call("v1alpha1/{+name}", "GET", Deployment, name=name)

    def nodesDeploymentsList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                             pageToken: str|None = None) -> ListDeploymentsResponse:
        return self._call("v1alpha1/{+parent}/deployments", "GET", ListDeploymentsResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesDeploymentsMove(self, name: str, req: MoveDeploymentRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def nodesDeploymentsPatch(self, name: str, req: Deployment,
                              updateMask: str|list[str]|None = None) -> Deployment:
        return self._call("v1alpha1/{+name}", "PATCH", Deployment, body=req, name=name,
                          updateMask=updateMask)

    def nodesDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def nodesDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def nodesDevicesDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def nodesDevicesGet(self, name: str) -> Device:
        return self._call("v1alpha1/{+name}", "GET", Device, name=name)

    def nodesDevicesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                         pageToken: str|None = None) -> ListDevicesResponse:
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesDevicesMove(self, name: str, req: MoveDeviceRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def nodesDevicesPatch(self, name: str, req: Device, updateMask: str|list[str]|None = None) -> Device:
        return self._call("v1alpha1/{+name}", "PATCH", Device, body=req, name=name, updateMask=updateMask)

    def nodesDevicesSignDevice(self, name: str, req: SignDeviceRequest) -> Empty:
        return self._call("v1alpha1/{+name}:signDevice", "POST", Empty, body=req, name=name)

    def nodesDevicesUpdateSigned(self, name: str, req: UpdateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+name}:updateSigned", "PATCH", Device, body=req, name=name)

    def nodesGet(self, name: str) -> Node:
        return self._call("v1alpha1/{+name}", "GET", Node, name=name)

    def nodesNodesCreate(self, parent: str, req: Node) -> Node:
        return self._call("v1alpha1/{+parent}/nodes", "POST", Node, body=req, parent=parent)

    def nodesNodesDelete(self, name: str) -> Empty:
        return self._call("v1alpha1/{+name}", "DELETE", Empty, name=name)

    def nodesNodesDeploymentsCreate(self, parent: str, req: Deployment) -> Deployment:
        return self._call("v1alpha1/{+parent}/deployments", "POST", Deployment, body=req, parent=parent)

    def nodesNodesDeploymentsList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                                  pageToken: str|None = None) -> ListDeploymentsResponse:
        return self._call("v1alpha1/{+parent}/deployments", "GET", ListDeploymentsResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesNodesDevicesCreate(self, parent: str, req: Device) -> Device:
        return self._call("v1alpha1/{+parent}/devices", "POST", Device, body=req, parent=parent)

    def nodesNodesDevicesCreateSigned(self, parent: str, req: CreateSignedDeviceRequest) -> Device:
        return self._call("v1alpha1/{+parent}/devices:createSigned", "POST", Device, body=req, parent=parent)

    def nodesNodesDevicesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                              pageToken: str|None = None) -> ListDevicesResponse:
        return self._call("v1alpha1/{+parent}/devices", "GET", ListDevicesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesNodesGet(self, name: str) -> Node:
        return self._call("v1alpha1/{+name}", "GET", Node, name=name)

    def nodesNodesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                       pageToken: str|None = None) -> ListNodesResponse:
        return self._call("v1alpha1/{+parent}/nodes", "GET", ListNodesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesNodesMove(self, name: str, req: MoveNodeRequest) -> Operation:
        return self._call("v1alpha1/{+name}:move", "POST", Operation, body=req, name=name)

    def nodesNodesNodesCreate(self, parent: str, req: Node) -> Node:
        return self._call("v1alpha1/{+parent}/nodes", "POST", Node, body=req, parent=parent)

    def nodesNodesNodesList(self, parent: str, filter: str|None = None, pageSize: int|None = None,
                            pageToken: str|None = None) -> ListNodesResponse:
        return self._call("v1alpha1/{+parent}/nodes", "GET", ListNodesResponse,
                          parent=parent, filter=filter, pageSize=pageSize, pageToken=pageToken)

    def nodesNodesPatch(self, name: str, req: Node, updateMask: str|list[str]|None = None) -> Node:
        return self._call("v1alpha1/{+name}", "PATCH", Node, body=req, name=name, updateMask=updateMask)

    # policies

    def policiesGet(self, req: GetPolicyRequest) -> Policy:
        """
        Gets the access control policy for a resource.  Empty if none is set.
        """
        return self._call("v1alpha1/policies:get", "POST", Policy, body=req)

    def policiesSet(self, req: SetPolicyRequest) -> Policy:
        """
        Replaces any existing policy on the resource.
        """
        return self._call("v1alpha1/policies:set", "POST", Policy, body=req)

    def policiesTest(self, req: TestPermissionsRequest) -> TestPermissionsResponse:
        return self._call("v1alpha1/policies:test", "POST", TestPermissionsResponse, body=req)
