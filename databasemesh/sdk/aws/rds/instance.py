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

"""Fluent builder for Amazon RDS DB instances."""

import asyncio
from ...common.constants import (
    ERROR_CODES_DB_INSTANCE_NOT_FOUND,
    SUCCESS_CREATED,
    SUCCESS_DELETED,
    SUCCESS_REBOOTED,
    SUCCESS_RESTORED,
)
from ...common.decorator import tolerate_error_codes
from ...common.utils import first_item, handle_paginated_aws_api_call, upsert_filter
from .models import (
    DescInstance,
    DescInstanceSnapshot,
    convert_db_instance,
    convert_db_snapshot,
)
from datetime import datetime
from loguru import logger
from typing import Any, Dict, List, Optional


class Instance:
    """DB instance builder.

    Every setter writes its value into the request parameters of each
    operation that accepts it and returns the builder, so calls can be
    chained::

        await (
            rds.instance()
            .set_db_instance_identifier('orders-db')
            .set_engine('mysql')
            .set_db_instance_class('db.t3.micro')
            .set_allocated_storage(20)
            .create()
        )
    """

    def __init__(self, client: Any):
        self.client = client
        self.create_params: Dict[str, Any] = {}
        self.delete_params: Dict[str, Any] = {}
        self.reboot_params: Dict[str, Any] = {}
        self.describe_params: Dict[str, Any] = {}
        self.restore_pitr_params: Dict[str, Any] = {}
        self.create_snapshot_params: Dict[str, Any] = {}
        self.describe_snapshot_params: Dict[str, Any] = {}
        self.restore_from_snapshot_params: Dict[str, Any] = {}

    def _set(self, key: str, value: Any, *targets: Dict[str, Any]) -> 'Instance':
        for params in targets:
            params[key] = value
        return self

    def set_engine(self, engine: str) -> 'Instance':
        return self._set('Engine', engine, self.create_params, self.restore_from_snapshot_params)

    def set_engine_version(self, version: str) -> 'Instance':
        return self._set('EngineVersion', version, self.create_params)

    def set_db_instance_identifier(self, identifier: str) -> 'Instance':
        return self._set(
            'DBInstanceIdentifier',
            identifier,
            self.create_params,
            self.delete_params,
            self.reboot_params,
            self.describe_params,
            self.create_snapshot_params,
            self.restore_from_snapshot_params,
        )

    def set_master_username(self, username: str) -> 'Instance':
        return self._set('MasterUsername', username, self.create_params)

    def set_master_user_password(self, password: str) -> 'Instance':
        return self._set('MasterUserPassword', password, self.create_params)

    def set_db_instance_class(self, instance_class: str) -> 'Instance':
        return self._set(
            'DBInstanceClass',
            instance_class,
            self.create_params,
            self.restore_pitr_params,
            self.restore_from_snapshot_params,
        )

    def set_allocated_storage(self, size: int) -> 'Instance':
        return self._set('AllocatedStorage', size, self.create_params)

    def set_iops(self, iops: int) -> 'Instance':
        return self._set('Iops', iops, self.create_params, self.restore_pitr_params)

    def set_db_name(self, name: str) -> 'Instance':
        return self._set('DBName', name, self.create_params, self.restore_pitr_params)

    def set_vpc_security_group_ids(self, group_ids: List[str]) -> 'Instance':
        return self._set(
            'VpcSecurityGroupIds',
            list(group_ids),
            self.create_params,
            self.restore_pitr_params,
            self.restore_from_snapshot_params,
        )

    def set_db_subnet_group(self, name: str) -> 'Instance':
        return self._set(
            'DBSubnetGroupName',
            name,
            self.create_params,
            self.restore_pitr_params,
            self.restore_from_snapshot_params,
        )

    def set_multi_az(self, enable: bool) -> 'Instance':
        return self._set(
            'MultiAZ',
            enable,
            self.create_params,
            self.restore_pitr_params,
            self.restore_from_snapshot_params,
        )

    def set_availability_zone(self, zone: str) -> 'Instance':
        return self._set(
            'AvailabilityZone',
            zone,
            self.create_params,
            self.restore_pitr_params,
            self.restore_from_snapshot_params,
        )

    def set_delete_automated_backups(self, enable: bool) -> 'Instance':
        return self._set('DeleteAutomatedBackups', enable, self.delete_params)

    def set_final_db_snapshot_identifier(self, identifier: str) -> 'Instance':
        return self._set('FinalDBSnapshotIdentifier', identifier, self.delete_params)

    def set_skip_final_snapshot(self, skip: bool) -> 'Instance':
        return self._set('SkipFinalSnapshot', skip, self.delete_params)

    def set_force_failover(self, force: bool) -> 'Instance':
        """Fail over to another AZ on reboot; only valid for Multi-AZ instances."""
        return self._set('ForceFailover', force, self.reboot_params)

    def set_target_db_instance_identifier(self, identifier: str) -> 'Instance':
        return self._set('TargetDBInstanceIdentifier', identifier, self.restore_pitr_params)

    def set_restore_time(self, restore_time: datetime) -> 'Instance':
        return self._set('RestoreTime', restore_time, self.restore_pitr_params)

    def set_source_db_instance_automated_backups_arn(self, arn: str) -> 'Instance':
        return self._set('SourceDBInstanceAutomatedBackupsArn', arn, self.restore_pitr_params)

    def set_source_db_instance_identifier(self, identifier: str) -> 'Instance':
        return self._set('SourceDBInstanceIdentifier', identifier, self.restore_pitr_params)

    def set_source_dbi_resource_id(self, resource_id: str) -> 'Instance':
        return self._set('SourceDbiResourceId', resource_id, self.restore_pitr_params)

    def set_use_latest_restorable_time(self, enable: bool) -> 'Instance':
        return self._set('UseLatestRestorableTime', enable, self.restore_pitr_params)

    def set_db_cluster_identifier(self, identifier: str) -> 'Instance':
        return self._set('DBClusterIdentifier', identifier, self.create_params)

    def set_publicly_accessible(self, enable: bool) -> 'Instance':
        return self._set('PubliclyAccessible', enable, self.create_params)

    def set_license_model(self, model: str) -> 'Instance':
        return self._set('LicenseModel', model, self.create_params)

    def set_snapshot_identifier(self, identifier: str) -> 'Instance':
        return self._set(
            'DBSnapshotIdentifier',
            identifier,
            self.create_snapshot_params,
            self.describe_snapshot_params,
            self.restore_from_snapshot_params,
        )

    def set_filter(self, name: str, values: List[str]) -> 'Instance':
        """Set a describe filter, replacing the values of a filter with the same name."""
        upsert_filter(self.describe_params, name, values)
        return self

    async def create(self) -> Dict[str, Any]:
        """Create the DB instance.

        Returns:
            The raw CreateDBInstance response
        """
        identifier = self.create_params.get('DBInstanceIdentifier')
        logger.info(f'Creating DB instance {identifier}')
        response = await asyncio.to_thread(self.client.create_db_instance, **self.create_params)
        logger.success(SUCCESS_CREATED.format(f'DB instance {identifier}'))
        return response

    @tolerate_error_codes(ERROR_CODES_DB_INSTANCE_NOT_FOUND)
    async def delete(self) -> Optional[Dict[str, Any]]:
        """Delete the DB instance. A missing instance counts as deleted.

        Returns:
            The raw DeleteDBInstance response, or None if the instance did not exist
        """
        identifier = self.delete_params.get('DBInstanceIdentifier')
        logger.info(f'Deleting DB instance {identifier}')
        response = await asyncio.to_thread(self.client.delete_db_instance, **self.delete_params)
        logger.success(SUCCESS_DELETED.format(f'DB instance {identifier}'))
        return response

    async def reboot(self) -> Dict[str, Any]:
        """Reboot the DB instance.

        The instance must be in a rebootable state such as ``available``.
        """
        identifier = self.reboot_params.get('DBInstanceIdentifier')
        logger.info(f'Rebooting DB instance {identifier}')
        response = await asyncio.to_thread(self.client.reboot_db_instance, **self.reboot_params)
        logger.success(SUCCESS_REBOOTED.format(f'DB instance {identifier}'))
        return response

    @tolerate_error_codes(ERROR_CODES_DB_INSTANCE_NOT_FOUND)
    async def describe(self) -> Optional[DescInstance]:
        """Describe the first instance matching the identifier and filters.

        Returns:
            The instance summary, or None if nothing matched
        """
        response = await asyncio.to_thread(
            self.client.describe_db_instances, **self.describe_params
        )
        instance = first_item(response, 'DBInstances')
        return convert_db_instance(instance) if instance else None

    @tolerate_error_codes(ERROR_CODES_DB_INSTANCE_NOT_FOUND, default=list)
    async def describe_all(self) -> List[DescInstance]:
        """Describe every instance matching the identifier and filters.

        Every page is read; ``SDKContext.max_items`` does not apply.
        """
        return await asyncio.to_thread(
            handle_paginated_aws_api_call,
            client=self.client,
            paginator_name='describe_db_instances',
            operation_parameters=self.describe_params,
            format_function=convert_db_instance,
            result_key='DBInstances',
            capped=False,
        )

    async def restore_pitr(self) -> Dict[str, Any]:
        """Restore a new DB instance to a point in time."""
        target = self.restore_pitr_params.get('TargetDBInstanceIdentifier')
        logger.info(f'Restoring DB instance {target} to a point in time')
        response = await asyncio.to_thread(
            self.client.restore_db_instance_to_point_in_time, **self.restore_pitr_params
        )
        logger.success(SUCCESS_RESTORED.format(f'DB instance {target}'))
        return response

    async def create_snapshot(self) -> Dict[str, Any]:
        """Create a manual snapshot of the DB instance."""
        snapshot = self.create_snapshot_params.get('DBSnapshotIdentifier')
        logger.info(f'Creating DB snapshot {snapshot}')
        response = await asyncio.to_thread(
            self.client.create_db_snapshot, **self.create_snapshot_params
        )
        logger.success(SUCCESS_CREATED.format(f'DB snapshot {snapshot}'))
        return response

    async def describe_snapshot(self) -> Optional[DescInstanceSnapshot]:
        """Describe the first snapshot matching the snapshot identifier.

        Returns:
            The snapshot summary, or None if nothing matched
        """
        response = await asyncio.to_thread(
            self.client.describe_db_snapshots, **self.describe_snapshot_params
        )
        snapshot = first_item(response, 'DBSnapshots')
        return convert_db_snapshot(snapshot) if snapshot else None

    async def restore_from_snapshot(self) -> Dict[str, Any]:
        """Restore a new DB instance from a DB snapshot."""
        identifier = self.restore_from_snapshot_params.get('DBInstanceIdentifier')
        logger.info(f'Restoring DB instance {identifier} from snapshot')
        response = await asyncio.to_thread(
            self.client.restore_db_instance_from_db_snapshot, **self.restore_from_snapshot_params
        )
        logger.success(SUCCESS_RESTORED.format(f'DB instance {identifier}'))
        return response
