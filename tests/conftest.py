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
"""Global pytest fixtures for Database Mesh SDK tests."""

import os
import pytest
from databasemesh.sdk.aws.rds import RDSService
from databasemesh.sdk.aws.s3 import S3Service
from databasemesh.sdk.common.constants import DEFAULT_MAX_ITEMS
from databasemesh.sdk.common.context import SDKContext
from datetime import datetime, timezone
from unittest.mock import MagicMock


@pytest.fixture(scope='session', autouse=True)
def tests_setup_and_teardown():
    """Mock environment and module variables for testing."""
    # Will be executed before the first test
    old_environ = dict(os.environ)
    os.environ.update(
        {
            'AWS_DEFAULT_REGION': 'us-east-1',  # pragma: allowlist secret
            'AWS_ACCESS_KEY_ID': 'mock_access_key',  # pragma: allowlist secret
            'AWS_SECRET_ACCESS_KEY': 'mock_secret_key',  # pragma: allowlist secret
        }
    )

    yield
    # Will be executed after the last test
    os.environ.clear()
    os.environ.update(old_environ)


@pytest.fixture(autouse=True)
def reset_sdk_context():
    """Restore the default SDK context after each test."""
    yield
    SDKContext.initialize(max_items=DEFAULT_MAX_ITEMS, endpoint_url=None)


@pytest.fixture
def mock_session():
    """Mock boto3 session handing out a MagicMock client."""
    session = MagicMock()
    session.region_name = 'us-east-1'
    session.client.return_value = MagicMock()
    return session


@pytest.fixture
def mock_rds_client(mock_session):
    """Fixture providing the mock client behind an RDSService."""
    return mock_session.client.return_value


@pytest.fixture
def rds_service(mock_session):
    """RDSService built on the mock session."""
    return RDSService(mock_session)


@pytest.fixture
def mock_s3_client(mock_session):
    """Fixture providing the mock client behind an S3Service."""
    return mock_session.client.return_value


@pytest.fixture
def s3_service(mock_session):
    """S3Service built on the mock session."""
    return S3Service(mock_session)


@pytest.fixture
def sample_db_cluster():
    """Return a sample DB cluster response."""
    return {
        'DBClusterIdentifier': 'test-db-cluster',
        'Status': 'available',
        'Engine': 'aurora-mysql',
        'EngineVersion': '5.7.mysql_aurora.2.10.2',
        'DBClusterArn': 'arn:aws:rds:us-east-1:123456789012:cluster:test-db-cluster',
        'Endpoint': 'test-db-cluster.cluster-abc123.us-east-1.rds.amazonaws.com',
        'ReaderEndpoint': 'test-db-cluster.cluster-ro-abc123.us-east-1.rds.amazonaws.com',
        'Port': 3306,
        'MasterUsername': 'admin',
        'AvailabilityZones': ['us-east-1a', 'us-east-1b', 'us-east-1c'],
        'MultiAZ': True,
        'EngineMode': 'provisioned',
        'ClusterCreateTime': datetime(2023, 1, 1, tzinfo=timezone.utc),
        'DBClusterMembers': [
            {
                'DBInstanceIdentifier': 'test-db-instance-1',
                'IsClusterWriter': True,
                'DBClusterParameterGroupStatus': 'in-sync',
                'PromotionTier': 1,
            },
            {
                'DBInstanceIdentifier': 'test-db-instance-2',
                'IsClusterWriter': False,
                'DBClusterParameterGroupStatus': 'in-sync',
                'PromotionTier': 1,
            },
        ],
        'VpcSecurityGroups': [{'VpcSecurityGroupId': 'sg-12345678', 'Status': 'active'}],
        'DBClusterParameterGroup': 'default.aurora-mysql5.7',
        'DBSubnetGroup': 'default',
        'BackupRetentionPeriod': 7,
        'PreferredBackupWindow': '07:00-09:00',
        'PreferredMaintenanceWindow': 'sun:04:00-sun:05:00',
        'TagList': [{'Key': 'Environment', 'Value': 'Production'}],
    }


@pytest.fixture
def sample_db_instance():
    """Return a sample DB instance response."""
    return {
        'DBInstanceIdentifier': 'test-db-instance',
        'DBInstanceClass': 'db.t3.micro',
        'Engine': 'mysql',
        'EngineVersion': '8.0.35',
        'DBInstanceStatus': 'available',
        'MasterUsername': 'admin',
        'DBName': 'testdb',
        'Endpoint': {
            'Address': 'test-db-instance.abc123.us-east-1.rds.amazonaws.com',
            'Port': 3306,
            'HostedZoneId': 'Z2R2ITUGPM61AM',
        },
        'AllocatedStorage': 20,
        'InstanceCreateTime': datetime(2023, 1, 1, tzinfo=timezone.utc),
        'BackupRetentionPeriod': 7,
        'VpcSecurityGroups': [{'VpcSecurityGroupId': 'sg-12345678', 'Status': 'active'}],
        'DBParameterGroups': [
            {'DBParameterGroupName': 'default.mysql8.0', 'ParameterApplyStatus': 'in-sync'}
        ],
        'AvailabilityZone': 'us-east-1a',
        'SecondaryAvailabilityZone': 'us-east-1b',
        'MultiAZ': False,
        'ReadReplicaDBInstanceIdentifiers': ['test-db-replica'],
        'StatusInfos': [
            {
                'StatusType': 'read replication',
                'Normal': True,
                'Status': 'replicating',
                'Message': '',
            }
        ],
        'DbiResourceId': 'db-ABCDEFGHIJKLMNOPQRSTUVWXYZ',  # pragma: allowlist secret
        'DBInstanceArn': 'arn:aws:rds:us-east-1:123456789012:db:test-db-instance',
        'TagList': [{'Key': 'Environment', 'Value': 'Test'}],
        'DBClusterIdentifier': 'test-cluster',
        'DeletionProtection': False,
    }
