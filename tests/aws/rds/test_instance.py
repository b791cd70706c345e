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
"""Tests for the DB instance builder."""

import pytest
from botocore.exceptions import ClientError
from databasemesh.sdk.aws.rds import DBInstanceStatus, DescInstance, Instance, RDSService
from databasemesh.sdk.aws.rds.models import convert_db_instance
from datetime import datetime, timezone


def not_found(operation: str) -> ClientError:
    return ClientError(
        {'Error': {'Code': 'DBInstanceNotFound', 'Message': 'DBInstance not found'}}, operation
    )


class TestInstanceSetters:
    """Test cases for parameter fan-out of the instance setters."""

    def test_service_caches_builder(self, rds_service):
        """Test the service hands out one builder per kind."""
        assert isinstance(rds_service.instance(), Instance)
        assert rds_service.instance() is rds_service.instance()

    def test_identifier_fans_out(self, rds_service):
        """Test the identifier reaches every request that takes it."""
        instance = rds_service.instance().set_db_instance_identifier('test-db-instance')

        for params in (
            instance.create_params,
            instance.delete_params,
            instance.reboot_params,
            instance.describe_params,
            instance.create_snapshot_params,
            instance.restore_from_snapshot_params,
        ):
            assert params['DBInstanceIdentifier'] == 'test-db-instance'
        assert 'DBInstanceIdentifier' not in instance.restore_pitr_params

    def test_final_snapshot_identifier(self, rds_service):
        """Test the final snapshot identifier lands on the delete request."""
        instance = rds_service.instance().set_final_db_snapshot_identifier('final-snap')

        assert instance.delete_params['FinalDBSnapshotIdentifier'] == 'final-snap'
        assert 'DBSnapshotIdentifier' not in instance.delete_params

    def test_snapshot_identifier(self, rds_service):
        instance = rds_service.instance().set_snapshot_identifier('snap-1')

        assert instance.create_snapshot_params['DBSnapshotIdentifier'] == 'snap-1'
        assert instance.describe_snapshot_params['DBSnapshotIdentifier'] == 'snap-1'
        assert instance.restore_from_snapshot_params['DBSnapshotIdentifier'] == 'snap-1'

    def test_set_filter_replaces_same_name(self, rds_service):
        """Test setting a filter twice keeps only the latest values."""
        instance = (
            rds_service.instance()
            .set_filter('engine', ['mysql'])
            .set_filter('db-cluster-id', ['a'])
            .set_filter('engine', ['postgres'])
        )

        assert instance.describe_params['Filters'] == [
            {'Name': 'engine', 'Values': ['postgres']},
            {'Name': 'db-cluster-id', 'Values': ['a']},
        ]

    def test_restore_settings(self, rds_service):
        restore_time = datetime(2024, 5, 1, tzinfo=timezone.utc)
        instance = (
            rds_service.instance()
            .set_source_db_instance_identifier('source-db')
            .set_target_db_instance_identifier('restored-db')
            .set_restore_time(restore_time)
            .set_db_instance_class('db.r6g.large')
        )

        assert instance.restore_pitr_params == {
            'SourceDBInstanceIdentifier': 'source-db',
            'TargetDBInstanceIdentifier': 'restored-db',
            'RestoreTime': restore_time,
            'DBInstanceClass': 'db.r6g.large',
        }


class TestInstanceOperations:
    """Test cases for the instance operations."""

    @pytest.mark.asyncio
    async def test_create(self, rds_service, mock_rds_client, sample_db_instance):
        """Test create sends the accumulated parameters."""
        mock_rds_client.create_db_instance.return_value = {'DBInstance': sample_db_instance}

        result = await (
            rds_service.instance()
            .set_db_instance_identifier('test-db-instance')
            .set_engine('mysql')
            .set_db_instance_class('db.t3.micro')
            .set_allocated_storage(20)
            .set_master_username('admin')
            .set_master_user_password('password')  # pragma: allowlist secret
            .create()
        )

        assert result['DBInstance']['DBInstanceIdentifier'] == 'test-db-instance'
        mock_rds_client.create_db_instance.assert_called_once_with(
            DBInstanceIdentifier='test-db-instance',
            Engine='mysql',
            DBInstanceClass='db.t3.micro',
            AllocatedStorage=20,
            MasterUsername='admin',
            MasterUserPassword='password',  # pragma: allowlist secret
        )

    @pytest.mark.asyncio
    async def test_create_propagates_errors(self, rds_service, mock_rds_client):
        """Test create surfaces AWS errors unchanged."""
        mock_rds_client.create_db_instance.side_effect = ClientError(
            {'Error': {'Code': 'DBInstanceAlreadyExists', 'Message': 'exists'}},
            'CreateDBInstance',
        )

        with pytest.raises(ClientError):
            await rds_service.instance().set_db_instance_identifier('db').create()

    @pytest.mark.asyncio
    async def test_delete(self, rds_service, mock_rds_client):
        mock_rds_client.delete_db_instance.return_value = {'DBInstance': {}}

        await (
            rds_service.instance()
            .set_db_instance_identifier('test-db-instance')
            .set_skip_final_snapshot(True)
            .delete()
        )

        mock_rds_client.delete_db_instance.assert_called_once_with(
            DBInstanceIdentifier='test-db-instance', SkipFinalSnapshot=True
        )

    @pytest.mark.asyncio
    async def test_delete_missing_instance(self, rds_service, mock_rds_client):
        """Test deleting an instance that does not exist succeeds quietly."""
        mock_rds_client.delete_db_instance.side_effect = not_found('DeleteDBInstance')

        result = await rds_service.instance().set_db_instance_identifier('gone').delete()

        assert result is None

    @pytest.mark.asyncio
    async def test_delete_other_error(self, rds_service, mock_rds_client):
        mock_rds_client.delete_db_instance.side_effect = ClientError(
            {'Error': {'Code': 'InvalidDBInstanceState', 'Message': 'busy'}}, 'DeleteDBInstance'
        )

        with pytest.raises(ClientError):
            await rds_service.instance().set_db_instance_identifier('busy').delete()

    @pytest.mark.asyncio
    async def test_reboot(self, rds_service, mock_rds_client):
        await (
            rds_service.instance()
            .set_db_instance_identifier('test-db-instance')
            .set_force_failover(True)
            .reboot()
        )

        mock_rds_client.reboot_db_instance.assert_called_once_with(
            DBInstanceIdentifier='test-db-instance', ForceFailover=True
        )

    @pytest.mark.asyncio
    async def test_describe(self, rds_service, mock_rds_client, sample_db_instance):
        """Test describe converts the first instance of the response."""
        mock_rds_client.describe_db_instances.return_value = {'DBInstances': [sample_db_instance]}

        instance = rds_service.instance().set_db_instance_identifier('test-db-instance')
        result = await instance.describe()

        assert isinstance(result, DescInstance)
        assert result.db_instance_identifier == 'test-db-instance'
        assert result.db_instance_status == 'available'
        assert result.endpoint.port == 3306
        assert result.secondary_az == 'us-east-1b'
        assert result.read_replica_db_instance_identifiers == ['test-db-replica']
        assert result.read_replica_status_infos[0].status == 'replicating'
        assert result.db_parameter_groups[0].name == 'default.mysql8.0'
        assert result.db_cluster_identifier == 'test-cluster'

    @pytest.mark.asyncio
    async def test_describe_not_found(self, rds_service, mock_rds_client):
        """Test describing a missing instance returns None."""
        mock_rds_client.describe_db_instances.side_effect = not_found('DescribeDBInstances')

        assert await rds_service.instance().set_db_instance_identifier('gone').describe() is None

    @pytest.mark.asyncio
    async def test_describe_empty(self, rds_service, mock_rds_client):
        mock_rds_client.describe_db_instances.return_value = {'DBInstances': []}

        assert await rds_service.instance().describe() is None

    @pytest.mark.asyncio
    async def test_describe_all(self, rds_service, mock_rds_client, sample_db_instance):
        """Test describe_all walks every page without the item cap."""
        second = dict(sample_db_instance, DBInstanceIdentifier='test-db-instance-2')
        paginator = mock_rds_client.get_paginator.return_value
        paginator.paginate.return_value = [
            {'DBInstances': [sample_db_instance]},
            {'DBInstances': [second]},
        ]

        result = await rds_service.instance().set_filter('engine', ['mysql']).describe_all()

        assert [item.db_instance_identifier for item in result] == [
            'test-db-instance',
            'test-db-instance-2',
        ]
        mock_rds_client.get_paginator.assert_called_once_with('describe_db_instances')
        assert paginator.paginate.call_args[1]['Filters'] == [
            {'Name': 'engine', 'Values': ['mysql']}
        ]
        assert 'PaginationConfig' not in paginator.paginate.call_args[1]

    @pytest.mark.asyncio
    async def test_describe_all_not_found(self, rds_service, mock_rds_client):
        """Test describe_all returns an empty list when nothing exists."""
        mock_rds_client.get_paginator.return_value.paginate.side_effect = not_found(
            'DescribeDBInstances'
        )

        assert await rds_service.instance().set_db_instance_identifier('gone').describe_all() == []

    @pytest.mark.asyncio
    async def test_restore_pitr(self, rds_service, mock_rds_client):
        await (
            rds_service.instance()
            .set_source_db_instance_identifier('source-db')
            .set_target_db_instance_identifier('restored-db')
            .set_use_latest_restorable_time(True)
            .restore_pitr()
        )

        mock_rds_client.restore_db_instance_to_point_in_time.assert_called_once_with(
            SourceDBInstanceIdentifier='source-db',
            TargetDBInstanceIdentifier='restored-db',
            UseLatestRestorableTime=True,
        )

    @pytest.mark.asyncio
    async def test_create_snapshot(self, rds_service, mock_rds_client):
        await (
            rds_service.instance()
            .set_db_instance_identifier('test-db-instance')
            .set_snapshot_identifier('snap-1')
            .create_snapshot()
        )

        mock_rds_client.create_db_snapshot.assert_called_once_with(
            DBInstanceIdentifier='test-db-instance', DBSnapshotIdentifier='snap-1'
        )

    @pytest.mark.asyncio
    async def test_describe_snapshot(self, rds_service, mock_rds_client):
        mock_rds_client.describe_db_snapshots.return_value = {
            'DBSnapshots': [
                {
                    'DBSnapshotIdentifier': 'snap-1',
                    'DBInstanceIdentifier': 'test-db-instance',
                    'Status': 'available',
                    'PercentProgress': 100,
                    'SnapshotType': 'manual',
                }
            ]
        }

        result = await rds_service.instance().set_snapshot_identifier('snap-1').describe_snapshot()

        assert result.db_snapshot_identifier == 'snap-1'
        assert result.percent_progress == 100
        mock_rds_client.describe_db_snapshots.assert_called_once_with(
            DBSnapshotIdentifier='snap-1'
        )

    @pytest.mark.asyncio
    async def test_describe_snapshot_empty(self, rds_service, mock_rds_client):
        mock_rds_client.describe_db_snapshots.return_value = {'DBSnapshots': []}

        assert await rds_service.instance().describe_snapshot() is None

    @pytest.mark.asyncio
    async def test_restore_from_snapshot(self, rds_service, mock_rds_client):
        await (
            rds_service.instance()
            .set_db_instance_identifier('restored-db')
            .set_snapshot_identifier('snap-1')
            .set_engine('mysql')
            .restore_from_snapshot()
        )

        mock_rds_client.restore_db_instance_from_db_snapshot.assert_called_once_with(
            DBInstanceIdentifier='restored-db', DBSnapshotIdentifier='snap-1', Engine='mysql'
        )


def test_service_uses_rds_client(mock_session):
    """Test the service builds its client for the rds service."""
    RDSService(mock_session)
    assert mock_session.client.call_args[1]['service_name'] == 'rds'


class TestInstanceStatus:
    """Test cases for the status of a converted instance."""

    def test_known_status_is_enum(self, sample_db_instance):
        result = convert_db_instance(dict(sample_db_instance, DBInstanceStatus='backing-up'))

        assert result.db_instance_status is DBInstanceStatus.BACKING_UP

    def test_unknown_status_stays_str(self, sample_db_instance):
        """Test a status newer than the enum is kept as plain text."""
        result = convert_db_instance(
            dict(sample_db_instance, DBInstanceStatus='storage-optimization')
        )

        assert result.db_instance_status == 'storage-optimization'
        assert not isinstance(result.db_instance_status, DBInstanceStatus)
