import os
import re
import logging
from typing import Optional

import boto3
from botocore.client import BaseClient
from botocore.credentials import RefreshableCredentials
from botocore.exceptions import BotoCoreError, ClientError
from botocore.session import get_session

# GlueClone Imports
from glueclone.utils.config_manager import ConfigManager
from glueclone.utils.execution_environment import running_on_lambda, running_on_glue


class AWSSession:
    """AWSSession (Singleton): the boto3 session every Glue client is built from

    With no GLUECLONE_ROLE in the site config this is the plain default boto3
    session. With a role configured (and we aren't already running as it) the
    session carries auto-refreshing credentials for that role.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._ready = False
        return cls._instance

    def __init__(self):
        if self._ready:
            return
        self.log = logging.getLogger("glueclone")
        cm = ConfigManager()
        self.role_name = cm.get_config("GLUECLONE_ROLE")
        if cm.get_config("AWS_PROFILE"):
            os.environ["AWS_PROFILE"] = cm.get_config("AWS_PROFILE")

        # Resolve who we are up front so credential problems surface before any Glue call
        try:
            self.caller_arn, self.account_id = self._caller_identity()
            self.region = boto3.Session().region_name
        except (ClientError, BotoCoreError) as e:
            msg = f"AWS credential failure ({e}): check AWS_PROFILE and/or renew the SSO token"
            self.log.critical(msg)
            raise RuntimeError(msg) from e
        self._boto3_session = None
        self._ready = True

    @staticmethod
    def _caller_identity():
        identity = boto3.client("sts").get_caller_identity()
        return identity["Arn"], identity["Account"]

    @property
    def boto3_session(self) -> boto3.Session:
        if self._boto3_session is None:
            self._boto3_session = self._build_session()
        return self._boto3_session

    def glue_client(self, region: Optional[str] = None) -> BaseClient:
        """Glue client for the given region (the session region when None)"""
        return self.boto3_session.client("glue", region_name=region or self.region)

    def _build_session(self) -> boto3.Session:
        if not self.role_name:
            return boto3.Session()

        # Lambda/Glue run with their own execution role; so does a caller already in the role
        if running_on_lambda() or running_on_glue() or f"/{self.role_name}" in self.caller_arn:
            self.log.important(f"Already running with {self.role_name}, using the default session")
            return boto3.Session()

        try:
            credentials = RefreshableCredentials.create_from_metadata(
                metadata=self._assume_role(),
                refresh_using=self._assume_role,
                method="sts-assume-role",
            )
        except Exception as e:
            msg = f"Could not assume {self.role_name}: check AWS_PROFILE and/or renew the SSO token"
            self.log.critical(msg)
            raise RuntimeError(msg) from e
        botocore_session = get_session()
        botocore_session._credentials = credentials
        return boto3.Session(botocore_session=botocore_session)

    def role_arn(self) -> str:
        """ARN of the configured GLUECLONE_ROLE in the caller's account"""
        if not re.fullmatch(r"\d{12}", self.account_id):
            raise ValueError(f"Unexpected AWS account id: {self.account_id}")
        if not re.fullmatch(r"[\w+=,.@-]+", self.role_name):
            raise ValueError(f"Invalid role name: {self.role_name}")
        return f"arn:aws:iam::{self.account_id}:role/{self.role_name}"

    def _assume_role(self) -> dict:
        """Credentials metadata for RefreshableCredentials (also used as its refresh callback)"""
        creds = boto3.client("sts").assume_role(RoleArn=self.role_arn(), RoleSessionName="glueclone")["Credentials"]
        self.log.info(f"Assumed {self.role_name}, credentials expire at {creds['Expiration'].astimezone()}")
        return {
            "access_key": creds["AccessKeyId"],
            "secret_key": creds["SecretAccessKey"],
            "token": creds["SessionToken"],
            "expiry_time": creds["Expiration"].isoformat(),
        }
