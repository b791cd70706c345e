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
"""Tests for per-region session construction."""

from botocore.exceptions import BotoCoreError
from databasemesh.sdk.aws.session import Sessions
from unittest.mock import MagicMock, patch


class TestSessions:
    """Test cases for Sessions."""

    def test_build_one_session_per_region(self):
        """Test every region gets a session with its own credentials."""
        sessions = (
            Sessions()
            .set_credential('us-east-1', 'ak-1', 'sk-1')  # pragma: allowlist secret
            .set_credential('eu-west-1', 'ak-2', 'sk-2')  # pragma: allowlist secret
            .build()
        )

        assert set(sessions) == {'us-east-1', 'eu-west-1'}
        assert sessions['eu-west-1'].region_name == 'eu-west-1'
        credentials = sessions['eu-west-1'].get_credentials()
        assert credentials.access_key == 'ak-2'
        assert credentials.secret_key == 'sk-2'  # pragma: allowlist secret

    def test_last_credential_wins(self):
        """Test a repeated region keeps the last credential."""
        sessions = (
            Sessions()
            .set_credential('us-east-1', 'ak-1', 'sk-1')  # pragma: allowlist secret
            .set_credential('us-east-1', 'ak-2', 'sk-2')  # pragma: allowlist secret
            .build()
        )

        assert len(sessions) == 1
        assert sessions['us-east-1'].get_credentials().access_key == 'ak-2'

    def test_empty(self):
        """Test building without credentials yields no sessions."""
        assert Sessions().build() == {}

    def test_failed_session_is_skipped(self):
        """Test a session that cannot be built is left out."""
        good = MagicMock()
        with patch(
            'databasemesh.sdk.aws.session.boto3.Session',
            side_effect=[BotoCoreError(), good],
        ):
            sessions = (
                Sessions()
                .set_credential('us-east-1', 'ak-1', 'sk-1')  # pragma: allowlist secret
                .set_credential('eu-west-1', 'ak-2', 'sk-2')  # pragma: allowlist secret
                .build()
            )

        assert sessions == {'eu-west-1': good}
