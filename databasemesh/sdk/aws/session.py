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

"""Per-region boto3 session construction from static credentials."""

import boto3
from botocore.exceptions import BotoCoreError
from loguru import logger
from typing import Dict, List, NamedTuple


class Credential(NamedTuple):
    """Static credentials for one region."""

    region: str
    access_key_id: str
    secret_access_key: str


class Sessions:
    """Accumulates credentials and builds one boto3 session per region.

    Example:
        sessions = (
            Sessions()
            .set_credential('us-east-1', access_key, secret_key)
            .set_credential('eu-west-1', access_key, secret_key)
            .build()
        )
        rds = RDSService(sessions['us-east-1'])
    """

    def __init__(self):
        self.credentials: List[Credential] = []

    def set_credential(
        self, region: str, access_key_id: str, secret_access_key: str
    ) -> 'Sessions':
        """Queue a region and its static credentials."""
        self.credentials.append(Credential(region, access_key_id, secret_access_key))
        return self

    def build(self) -> Dict[str, boto3.Session]:
        """Build the sessions, keyed by region.

        A credential whose session cannot be built is skipped. When a region is
        given more than once the last credential wins.

        Returns:
            Mapping of region name to boto3 session
        """
        sessions = {}
        for credential in self.credentials:
            try:
                sessions[credential.region] = boto3.Session(
                    aws_access_key_id=credential.access_key_id,
                    aws_secret_access_key=credential.secret_access_key,
                    region_name=credential.region,
                )
            except BotoCoreError as e:
                logger.warning(f'Skipping session for region {credential.region}: {e}')

        logger.info(f'Built {len(sessions)} AWS session(s)')
        return sessions
