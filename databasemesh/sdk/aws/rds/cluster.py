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

"""Fluent builder for Amazon RDS DB clusters."""

import asyncio
from ...common.constants import (
    ERROR_CODES_DB_CLUSTER_NOT_FOUND,
    SUCCESS_CREATED,
    SUCCESS_DELETED,
    SUCCESS_FAILOVER,
    SUCCESS_REBOOTED,
    SUCCESS_RESTORED,
)
from ...common.decorator import tolerate_error_codes
from ...common.utils import first_item
from .models import (
    DescCluster,
    DescClusterSnapshot,
    convert_db_cluster,
    convert_db_cluster_snapshot,
)
from datetime import datetime
from loguru import logger
from typing import Any, Dict, List, Optional


class Cluster:
    """DB cluster builder.

    Setters fan their value out to the request parameters of every operation
    that accepts it and return the builder.
    """

    def __init__(self, client: Any):
        self.client = client
        self.create_params: Dict[str, Any] = {}
        self.delete_params: Dict[str, Any] = {}
        self.failover_params: Dict[str, Any] = {}
        self.failover_global_params: Dict[str, Any] = {}
        self.reboot_params: Dict[str, Any] = {}
        self.describe_params: Dict[str, Any] = {}
        self.restore_pitr_params: Dict[str, Any] = {}
        self.create_snapshot_params: Dict[str, Any] = {}
        self.describe_snapshot_params: Dict[str, Any] = {}

    def _set(self, key: str, value: Any, *targets: Dict[str, Any]) -> 'Cluster':
        for params in targets:
            params[key] = value
        return self

    def set_db_cluster_identifier(self, identifier: str) -> 'Cluster':
        return self._set(
            'DBClusterIdentifier',
            identifier,
            self.create_params,
            self.delete_params,
            self.failover_params,
            self.reboot_params,
            self.describe_params,
            self.restore_pitr_params,
            self.create_snapshot_params,
        )

    def set_target_db_instance_identifier(self, identifier: str) -> 'Cluster':
        return self._set('TargetDBInstanceIdentifier', identifier, self.failover_params)

    def set_global_cluster_identifier(self, identifier: str) -> 'Cluster':
        return self._set('GlobalClusterIdentifier', identifier, self.failover_global_params)

    def set_target_db_cluster_identifier(self, identifier: str) -> 'Cluster':
        return self._set('TargetDbClusterIdentifier', identifier, self.failover_global_params)

    def set_engine(self, engine: str) -> 'Cluster':
        return self._set('Engine', engine, self.create_params)

    def set_allocated_storage(self, size: int) -> 'Cluster':
        return self._set('AllocatedStorage', size, self.create_params)

    def set_availability_zones(self, zones: List[str]) -> 'Cluster':
        return self._set('AvailabilityZones', list(zones), self.create_params)

    def set_db_cluster_instance_class(self, instance_class: str) -> 'Cluster':
        return self._set(
            'DBClusterInstanceClass', instance_class, self.create_params, self.restore_pitr_params
        )

    def set_db_subnet_group_name(self, name: str) -> 'Cluster':
        return self._set('DBSubnetGroupName', name, self.create_params, self.restore_pitr_params)

    def set_database_name(self, name: str) -> 'Cluster':
        return self._set('DatabaseName', name, self.create_params)

    def set_engine_version(self, version: str) -> 'Cluster':
        return self._set('EngineVersion', version, self.create_params)

    def set_engine_mode(self, mode: str) -> 'Cluster':
        return self._set('EngineMode', mode, self.create_params)

    def set_master_username(self, username: str) -> 'Cluster':
        return self._set('MasterUsername', username, self.create_params)

    def set_master_user_password(self, password: str) -> 'Cluster':
        return self._set('MasterUserPassword', password, self.create_params)

    def set_vpc_security_group_ids(self, group_ids: List[str]) -> 'Cluster':
        return self._set('VpcSecurityGroupIds', list(group_ids), self.create_params)

    def set_storage_type(self, storage_type: str) -> 'Cluster':
        return self._set('StorageType', storage_type, self.create_params)

    def set_iops(self, iops: int) -> 'Cluster':
        return self._set('Iops', iops, self.create_params, self.restore_pitr_params)

    def set_publicly_accessible(self, enable: bool) -> 'Cluster':
        return self._set('PubliclyAccessible', enable, self.create_params)

    def set_skip_final_snapshot(self, skip: bool) -> 'Cluster':
        return self._set('SkipFinalSnapshot', skip, self.delete_params)

    def set_final_db_snapshot_identifier(self, identifier: str) -> 'Cluster':
        return self._set('FinalDBSnapshotIdentifier', identifier, self.delete_params)

    def set_source_db_cluster_identifier(self, identifier: str) -> 'Cluster':
        return self._set('SourceDBClusterIdentifier', identifier, self.restore_pitr_params)

    def set_backtrack_window(self, window: int) -> 'Cluster':
        """Set the backtrack window in seconds, 0 disables backtracking."""
        return self._set('BacktrackWindow', window, self.restore_pitr_params)

    def set_restore_to_time(self, restore_time: datetime) -> 'Cluster':
        return self._set('RestoreToTime', restore_time, self.restore_pitr_params)

    def set_restore_type(self, restore_type: str) -> 'Cluster':
        """Set the restore type, either ``full-copy`` or ``copy-on-write``."""
        return self._set('RestoreType', restore_type, self.restore_pitr_params)

    def set_use_latest_restorable_time(self, enable: bool) -> 'Cluster':
        return self._set('UseLatestRestorableTime', enable, self.restore_pitr_params)

    def set_snapshot_identifier(self, identifier: str) -> 'Cluster':
        return self._set(
            'DBClusterSnapshotIdentifier',
            identifier,
            self.create_snapshot_params,
            self.describe_snapshot_params,
        )

    async def failover(self) -> Dict[str, Any]:
        """Fail the cluster over to a replica, or to the target instance when set."""
        identifier = self.failover_params.get('DBClusterIdentifier')
        logger.info(f'Initiating failover for DB cluster {identifier}')
        response = await asyncio.to_thread(self.client.failover_db_cluster, **self.failover_params)
        logger.success(SUCCESS_FAILOVER.format(f'DB cluster {identifier}'))
        return response

    async def failover_global(self) -> Dict[str, Any]:
        """Promote the target cluster to primary of its global cluster."""
        identifier = self.failover_global_params.get('GlobalClusterIdentifier')
        logger.info(f'Initiating failover for global cluster {identifier}')
        response = await asyncio.to_thread(
            self.client.failover_global_cluster, **self.failover_global_params
        )
        logger.success(SUCCESS_FAILOVER.format(f'global cluster {identifier}'))
        return response

    async def create(self) -> Dict[str, Any]:
        """Create the DB cluster."""
        identifier = self.create_params.get('DBClusterIdentifier')
        logger.info(f'Creating DB cluster {identifier}')
        response = await asyncio.to_thread(self.client.create_db_cluster, **self.create_params)
        logger.success(SUCCESS_CREATED.format(f'DB cluster {identifier}'))
        return response

    @tolerate_error_codes(ERROR_CODES_DB_CLUSTER_NOT_FOUND)
    async def delete(self) -> Optional[Dict[str, Any]]:
        """Delete the DB cluster. A missing cluster counts as deleted."""
        identifier = self.delete_params.get('DBClusterIdentifier')
        logger.info(f'Deleting DB cluster {identifier}')
        response = await asyncio.to_thread(self.client.delete_db_cluster, **self.delete_params)
        logger.success(SUCCESS_DELETED.format(f'DB cluster {identifier}'))
        return response

    async def reboot(self) -> Dict[str, Any]:
        """Reboot every instance of the DB cluster."""
        identifier = self.reboot_params.get('DBClusterIdentifier')
        logger.info(f'Rebooting DB cluster {identifier}')
        response = await asyncio.to_thread(self.client.reboot_db_cluster, **self.reboot_params)
        logger.success(SUCCESS_REBOOTED.format(f'DB cluster {identifier}'))
        return response

    @tolerate_error_codes(ERROR_CODES_DB_CLUSTER_NOT_FOUND)
    async def describe(self) -> Optional[DescCluster]:
        """Describe the DB cluster.

        Returns:
            The cluster summary, or None if the cluster does not exist
        """
        response = await asyncio.to_thread(
            self.client.describe_db_clusters, **self.describe_params
        )
        cluster = first_item(response, 'DBClusters')
        return convert_db_cluster(cluster) if cluster else None

    async def restore_pitr(self) -> Dict[str, Any]:
        """Restore the source cluster into a new cluster at a point in time."""
        identifier = self.restore_pitr_params.get('DBClusterIdentifier')
        logger.info(f'Restoring DB cluster {identifier} to a point in time')
        response = await asyncio.to_thread(
            self.client.restore_db_cluster_to_point_in_time, **self.restore_pitr_params
        )
        logger.success(SUCCESS_RESTORED.format(f'DB cluster {identifier}'))
        return response

    async def create_snapshot(self) -> Dict[str, Any]:
        """Create a manual snapshot of the DB cluster."""
        snapshot = self.create_snapshot_params.get('DBClusterSnapshotIdentifier')
        logger.info(f'Creating DB cluster snapshot {snapshot}')
        response = await asyncio.to_thread(
            self.client.create_db_cluster_snapshot, **self.create_snapshot_params
        )
        logger.success(SUCCESS_CREATED.format(f'DB cluster snapshot {snapshot}'))
        return response

    async def describe_snapshot(self) -> Optional[DescClusterSnapshot]:
        """Describe the first cluster snapshot matching the snapshot identifier."""
        response = await asyncio.to_thread(
            self.client.describe_db_cluster_snapshots, **self.describe_snapshot_params
        )
        snapshot = first_item(response, 'DBClusterSnapshots')
        return convert_db_cluster_snapshot(snapshot) if snapshot else None
