# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Client construction for the AWS services wrapped by the Database Mesh SDK."""

import boto3
import os
from .constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_RETRY_MODE,
    SDK_USER_AGENT,
)
from .context import SDKContext
from botocore.config import Config
from loguru import logger
from typing import Any


class BaseClientFactory:
    """Base class for AWS service client factories."""

    _service_name: str = ''
    _env_prefix: str = ''

    @classmethod
    def get_config(cls) -> Config:
        """Build the botocore config with retry and timeout settings.

        Returns:
            botocore.config.Config: The client configuration for this service
        """
        # configuration retry settings
        max_retries = int(os.environ.get(f'{cls._env_prefix}_MAX_RETRIES', DEFAULT_MAX_RETRIES))
        retry_mode = os.environ.get(f'{cls._env_prefix}_RETRY_MODE', DEFAULT_RETRY_MODE)
        connect_timeout = int(
            os.environ.get(f'{cls._env_prefix}_CONNECT_TIMEOUT', DEFAULT_CONNECT_TIMEOUT)
        )
        read_timeout = int(os.environ.get(f'{cls._env_prefix}_READ_TIMEOUT', DEFAULT_READ_TIMEOUT))

        return Config(
            retries={'max_attempts': max_retries, 'mode': retry_mode},
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            user_agent_extra=SDK_USER_AGENT,
        )

    @classmethod
    def create_client(cls, session: boto3.Session) -> Any:
        """Create an AWS service client from a session.

        Args:
            session: The boto3 session holding region and credentials

        Returns:
            boto3.client: An AWS service client configured with retries
        """
        kwargs = {'service_name': cls._service_name, 'config': cls.get_config()}
        endpoint_url = SDKContext.endpoint_url()
        if endpoint_url:
            kwargs['endpoint_url'] = endpoint_url

        logger.debug(f'Creating {cls._service_name} client for region {session.region_name}')
        return session.client(**kwargs)


class RDSClientFactory(BaseClientFactory):
    """Builds RDS clients using boto3."""

    _service_name = 'rds'
    _env_prefix = 'RDS'


class S3ClientFactory(BaseClientFactory):
    """Builds S3 clients using boto3."""

    _service_name = 's3'
    _env_prefix = 'S3'
