from collections.abc import Iterable
from pathlib import Path
import json
import copy
import logging

import google.auth
import google.auth.exceptions
from google.auth.credentials import Credentials as BaseCredentials
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

logger = logging.getLogger(__name__)

class __GoogleRestAccess():
    """
    Class encapsulating authenticated access to Google APIs.
    See https://developers.google.com/workspace/guides/create-credentials#choose_the_access_credential_that_is_right_for_you
    for an overview of what you'll need.  Once you've obtained a secrets file you can refer the object to it
    for authentication.  For OAuth it will trigger the confirmation screens.  Sessions will be preserved
    and refreshed to confirmation does not need to happen repeatedly.
    Without a secrets file application default credentials are tried, which is the usual
    route for the Cloud APIs (gcloud auth application-default login or a service account).

    It makes no sense to have multiple authenticated sessions per application so do this as a module singleton.
    Clients constructed without credentials of their own pick them up from here.
    """

    __SCOPES = {
        "cloud-platform": "https://www.googleapis.com/auth/cloud-platform",
        "cloud-platform-ro": "https://www.googleapis.com/auth/cloud-platform.read-only",
        "tables": "https://www.googleapis.com/auth/tables",
        "sasportal": "https://www.googleapis.com/auth/sasportal",
        "openid": "openid",
        "email": "email",
        "profile": "profile",
        "userinfo-email": "https://www.googleapis.com/auth/userinfo.email",
        "userinfo-profile": "https://www.googleapis.com/auth/userinfo.profile"
    }
    __SCOPE_URL_PREFIX = "https://www.googleapis.com/"

    __DEFAULT_AUTH_PROMPT_MSG = "Please visit this URL to authorize this application: {url}"
    __DEFAULT_AUTH_FLOW_SUCCESS_MSG = "The authentication flow has completed. You may close this window."
    __DEFAULT_SECRETS = (Path.home() / "googlerest_client_secrets.json").absolute()
    __DEFAULT_CACHE = (Path.home() / "googlerest_tokens.json").absolute()

    def __init__(self) -> None:
        """
        config and scopes can be specified here but as this is a global singleton
        its more expected to add them later.
        """
        self.reset()

    def __bool__(self) -> bool:
        """True is we are connected and authenticated"""
        return self.connected

    def __str__(self) -> str:
        if self.connected:
            return f"Connected:{str(self.session_scopes)}"
        return f"Disconnected:{str(self.__scopes)}"

    def __repr__(self) -> str:
        return f"{str(self.__class__)}:{str(self)}"

    @classmethod
    def get_scope(cls, scope: str) -> str:
        """
        Get a scope based on simplified label.
        A raw URL will also be expected.
        """
        s = str(scope)
        sc = cls.__SCOPES.get(s, "")
        if not sc and s.startswith(cls.__SCOPE_URL_PREFIX):
            sc = s
        return sc

    @property
    def client_secrets(self) -> Path:
        """
        Path to client secrets file as provided by Google when generating access credentials.
        """
        return self.__secrets

    @client_secrets.setter
    def client_secrets(self, value: Path|str) -> None:
        """
        Set path to client secrets.
        If this changes we need to reconnect as we have new credentials.
        """
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__secrets:
            self.__secrets = val
            if self.connected:
                self.connect()

    @property
    def cred_cache(self) -> Path:
        """
        Path to local credential cache to not have to do full authentication each time.
        """
        return self.__cache

    @cred_cache.setter
    def cred_cache(self, value: Path|str):
        val = value if isinstance(value, Path) else Path(str(value))
        if val != self.__cache:
            self.__cache = val
            if self.connected:
                self.connect()

    def clear(self):
        """Reset the access state."""
        self.__creds = None
        self.__scopes = []

    @property
    def connected(self) -> bool:
        """
        Are we authenticated with Google?
        """
        return bool(self.__creds) and bool(self.__creds.valid)

    @property
    def session_scopes(self) -> list[str]:
        """
        Scopes authenticated by Google for this session.
        This differs to self.scopes as that is what is requested or to be requested.
        """
        if self.connected:
            return list(getattr(self.__creds, 'scopes', None) or [])
        return []

    @property
    def scopes(self) -> list[str]:
        """
        The scopes requested or to be requested on next authentication sequence.
        """
        return self.__scopes

    @scopes.setter
    def scopes(self, value: None|list[str]|str) -> None:
        """
        Override a new list of session scopes.
        This will trigger a reconnect if the new list contains scopes
        that are not part of the current authenticate list.
        """
        slist = []
        if value is not None:
            if isinstance(value,str) or not isinstance(value,Iterable):
                value = [value]
            for v in value:
                s = self.get_scope(str(v))
                if s:
                    slist.append(s)
        self.__scopes = slist
        if self.__scopes and self.connected:
            self.refresh()
        else:
            self.__creds = None

    def append_scopes(self, *args) -> bool:
        """
        Adding to the current scope list.
        Labels that aren't known scopes are ignored.
        """
        for a in args:
            b = [a] if isinstance(a,str) or not isinstance(a, Iterable) else a
            for i in b:
                s = self.get_scope(str(i))
                if s and s not in self.__scopes:
                    self.__scopes.append(s)
        return self.refresh()

    def scope_in_session(self, scope: str) -> bool:
        """
        Is the specified scope in the currently authenicated session?
        """
        s = self.get_scope(scope)
        return bool(s) and self.connected and (s in self.session_scopes)

    @property
    def creds(self) -> BaseCredentials|None:
        """
        Current active access credentials or None
        """
        return self.__creds

    @creds.setter
    def creds(self, value: BaseCredentials|None) -> None:
        """
        Hand over credentials obtained some other way, a service account say.
        """
        self.__creds = value

    @property
    def config(self) -> dict:
        """
        Get all configuration state as a dict.
        Convenience for getting it all at once for pushing into a json, toml, ini, etc, file.
        """
        config = {
            'secrets': str(self.__secrets),
            'cache': str(self.__cache),
            'scopes': list(self.__scopes),
            'server': self.auth_server,
            'port': self.auth_port,
            'auth_prompt_msg': self.auth_prompt_msg,
            'flow_success_msg': self.auth_flow_success_msg,
        }
        if self.__developer_key is not None:
            config['developer_key'] = self.__developer_key
        return config

    @config.setter
    def config(self, config: dict) -> None:
        """
        Set configuration state from a dict.
        Convenience method for inserting state pulled from a config file or equivalent.
        """
        reconnect = False
        v = config.get('port', None)
        if v is not None:
            self.auth_port = int(v)
        v = config.get('server', None)
        if v is not None:
            self.auth_server = str(v)
        v = config.get('scopes', [])
        if v:
            self.__scopes = [s for s in (self.get_scope(i) for i in v) if s]
            reconnect = True
        v = config.get('cache', None)
        if v is not None:
            self.__cache = Path(v)
            reconnect = True
        v = config.get('secrets', None)
        if v is not None:
            self.__secrets = Path(v)
            reconnect = True
        v = config.get('auth_prompt_msg', None)
        if v is not None:
            self.auth_prompt_msg = str(v)
        v = config.get('flow_success_msg', None)
        if v is not None:
            self.auth_flow_success_msg = str(v)
        v = config.get('developer_key', None)
        if v is not None:
            self.developer_key = v
        if reconnect and self.connected:
            self.connect()

    @property
    def developer_key(self) -> str|None:
        """
        API key sent as the 'key' query parameter by clients that don't have their own.
        """
        return self.__developer_key

    @developer_key.setter
    def developer_key(self, value: str|None) -> None:
        self.__developer_key = value if value is None else str(value)

    def reset(self) -> None:
        """
        Reset all connection state to defaults.
        """
        self.__secrets = self.__DEFAULT_SECRETS
        self.__cache = self.__DEFAULT_CACHE
        self.__creds = None
        self.__scopes = []
        self.__developer_key = None
        self.auth_server = 'localhost'
        self.auth_port = 0
        self.auth_prompt_msg = self.__DEFAULT_AUTH_PROMPT_MSG
        self.auth_flow_success_msg = self.__DEFAULT_AUTH_FLOW_SUCCESS_MSG

    def refresh(self) -> bool:
        """
        Check the current scopes and if new requested ones are not present
        in the current session_scopes, refresh the access.
        """
        scopes_accounted = all(s in self.session_scopes for s in self.__scopes)
        if self.connected and not scopes_accounted:
            return self.connect()
        return True

    def _load_cache(self, requested_scopes: list[str]) -> None:
        if not (self.__cache.exists() and self.__cache.is_file()):
            return
        # the cache doesn't know to drop a token issued for fewer scopes
        cf = self.__cache.resolve()
        with open(cf, 'r', encoding='utf-8') as f:
            j = json.load(f)
        scopes = j.get('scopes',[])
        if not all(s in scopes for s in requested_scopes):
            logger.debug("token cache %s lacks requested scopes, discarding", cf)
            self.__cache.unlink()
        else:
            self.__creds = Credentials.from_authorized_user_file(str(cf), requested_scopes)

    def _save_cache(self, requested_scopes: list[str]) -> None:
        refresh_token = getattr(self.__creds, 'refresh_token', None)
        if not refresh_token:
            # application default and service account credentials refresh themselves
            return
        user_info = {'refresh_token': refresh_token, 'client_id': self.__creds.client_id,
                     'client_secret': self.__creds.client_secret, 'scopes': requested_scopes}
        with open(self.__cache.resolve(), 'w', encoding='utf-8') as f:
            json.dump(user_info, f, ensure_ascii=False, indent=2)

    def connect(self) -> bool:
        """
        Establish a new authentication session.
        Tries in turn the token cache, refreshing the cached token, the installed app
        OAuth flow when a client secrets file is present and finally application
        default credentials.
        If successful will save the credentials in the cache file to reuse
        on subsequent invocations.
        """
        self.__creds = None
        if not self.__scopes:
            return False
        requested_scopes = copy.copy(self.__scopes)
        self._load_cache(requested_scopes)
        if not self.connected:
            if self.__creds and self.__creds.refresh_token:
                try:
                    self.__creds.refresh(Request())
                except google.auth.exceptions.RefreshError as e:
                    logger.warning("failed to refresh stored creds: %s...deleting cred cache and re-authorizing", e)
                finally:
                    if not self.connected:
                        self.__cache.unlink(missing_ok=True)
                        self.__creds = None

            if not self.connected:
                if self.__secrets.exists() and self.__secrets.is_file():
                    flow = InstalledAppFlow.from_client_secrets_file(str(self.__secrets), requested_scopes)
                    self.__creds = flow.run_local_server(host=self.auth_server, port=self.auth_port,
                                                    authorization_prompt_message=self.auth_prompt_msg,
                                                    success_message=self.auth_flow_success_msg
                                                    )
                else:
                    # this will look at the GOOGLE_APPLICATION_CREDENTIALS envvar and
                    # other cloud default locations
                    try:
                        self.__creds, _ = google.auth.default(scopes=requested_scopes)
                        if not self.__creds.valid:
                            self.__creds.refresh(Request())
                    except google.auth.exceptions.DefaultCredentialsError as e:
                        logger.warning("no client secrets at %s and no default credentials: %s",
                                       self.__secrets, e)
                        self.__creds = None

            if self.connected:
                self._save_cache(requested_scopes)
        return self.connected

    def get_credentials(self) -> BaseCredentials|None:
        """
        Credentials for a client to use, connecting first if scopes have been
        requested but there is no session yet.  None means go unauthenticated.
        """
        if self.__creds is not None:
            return self.__creds
        if self.__scopes:
            self.connect()
        return self.__creds

gapi = __GoogleRestAccess()
