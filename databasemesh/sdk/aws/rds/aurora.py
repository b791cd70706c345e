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

"""Fluent builder managing an Aurora cluster together with its instances."""

import asyncio
import random
from ...common.constants import (
    AURORA_INSTANCE_NAME_FORMAT,
    ENDPOINT_TYPE_READER,
    ERROR_FINAL_SNAPSHOT_REQUIRED,
    FILTER_DB_CLUSTER_ID,
    SUCCESS_CREATED,
    SUCCESS_DELETED,
    SUCCESS_FAILOVER,
)
from ...common.utils import first_item, upsert_filter
from ...exceptions import ParameterRequiredException
from .models import DescCluster, convert_db_cluster
from loguru import logger
from typing import Any, Dict, List, Optional


class Aurora:
    """Aurora cluster builder.

    Cluster level settings go to the cluster requests and instance level
    settings to the member instance requests. ``create`` provisions the
    cluster followed by ``instance_number`` instances named
    ``<cluster>-instance-<i>``; ``delete`` removes every member instance
    before the cluster itself.
    """

    def __init__(self, client: Any):
        self.client = client
        self.instance_number = 0

        self.create_cluster_params: Dict[str, Any] = {}
        self.delete_cluster_params: Dict[str, Any] = {}
        self.failover_cluster_params: Dict[str, Any] = {}
        self.describe_cluster_params: Dict[str, Any] = {}
        self.create_endpoint_params: Dict[str, Any] = {'EndpointType': ENDPOINT_TYPE_READER}

        self.create_instance_params: Dict[str, Any] = {}
        self.delete_instance_params: Dict[str, Any] = {}
        self.describe_instance_params: Dict[str, Any] = {}

    def _set(self, key: str, value: Any, *targets: Dict[str, Any]) -> 'Aurora':
        for params in targets:
            params[key] = value
        return self

    def set_engine(self, engine: str) -> 'Aurora':
        return self._set('Engine', engine, self.create_cluster_params, self.create_instance_params)

    def set_engine_version(self, version: str) -> 'Aurora':
        return self._set('EngineVersion', version, self.create_cluster_params)

    def set_db_cluster_identifier(self, identifier: str) -> 'Aurora':
        return self._set(
            'DBClusterIdentifier',
            identifier,
            self.create_cluster_params,
            self.create_instance_params,
            self.failover_cluster_params,
            self.delete_cluster_params,
            self.describe_cluster_params,
            self.create_endpoint_params,
        )

    def set_master_username(self, username: str) -> 'Aurora':
        return self._set('MasterUsername', username, self.create_cluster_params)

    def set_master_user_password(self, password: str) -> 'Aurora':
        return self._set('MasterUserPassword', password, self.create_cluster_params)

    def set_vpc_security_group_ids(self, group_ids: List[str]) -> 'Aurora':
        return self._set('VpcSecurityGroupIds', list(group_ids), self.create_cluster_params)

    def set_db_subnet_group(self, name: str) -> 'Aurora':
        return self._set('DBSubnetGroupName', name, self.create_cluster_params)

    def set_skip_final_snapshot(self, skip: bool) -> 'Aurora':
        return self._set(
            'SkipFinalSnapshot', skip, self.delete_cluster_params, self.delete_instance_params
        )

    def set_final_db_snapshot_identifier(self, identifier: str) -> 'Aurora':
        return self._set('FinalDBSnapshotIdentifier', identifier, self.delete_cluster_params)

    def set_instance_number(self, number: int) -> 'Aurora':
        self.instance_number = number
        return self

    def set_db_instance_identifier(self, identifier: str) -> 'Aurora':
        return self._set(
            'DBInstanceIdentifier',
            identifier,
            self.create_instance_params,
            self.delete_instance_params,
        )

    def set_db_instance_class(self, instance_class: str) -> 'Aurora':
        return self._set('DBInstanceClass', instance_class, self.create_instance_params)

    def set_publicly_accessible(self, enable: bool) -> 'Aurora':
        return self._set('PubliclyAccessible', enable, self.create_instance_params)

    def set_delete_automated_backups(self, enable: bool) -> 'Aurora':
        return self._set('DeleteAutomatedBackups', enable, self.delete_instance_params)

    def set_db_cluster_endpoint_identifier(self, identifier: str) -> 'Aurora':
        return self._set('DBClusterEndpointIdentifier', identifier, self.create_endpoint_params)

    def _cluster_identifier(self) -> str:
        identifier = self.create_cluster_params.get('DBClusterIdentifier')
        if not identifier:
            raise ParameterRequiredException('DBClusterIdentifier')
        return identifier

    async def _create_cluster(self) -> str:
        identifier = self._cluster_identifier()
        logger.info(f'Creating Aurora cluster {identifier}')
        await asyncio.to_thread(self.client.create_db_cluster, **self.create_cluster_params)
        logger.success(SUCCESS_CREATED.format(f'Aurora cluster {identifier}'))
        return identifier

    async def _create_instance(self, params: Dict[str, Any]):
        identifier = params.get('DBInstanceIdentifier')
        logger.info(f'Creating Aurora instance {identifier}')
        await asyncio.to_thread(self.client.create_db_instance, **params)
        logger.success(SUCCESS_CREATED.format(f'Aurora instance {identifier}'))

    async def create(self):
        """Create the cluster, then ``instance_number`` member instances."""
        cluster = await self._create_cluster()
        for index in range(self.instance_number):
            name = AURORA_INSTANCE_NAME_FORMAT.format(cluster=cluster, index=index)
            params = dict(self.create_instance_params, DBInstanceIdentifier=name)
            await self._create_instance(params)

    async def create_with_primary(self):
        """Create the cluster and the single instance set by ``set_db_instance_identifier``."""
        if not self.create_instance_params.get('DBInstanceIdentifier'):
            raise ParameterRequiredException('DBInstanceIdentifier')
        await self._create_cluster()
        await self._create_instance(self.create_instance_params)

    async def failover_primary(self) -> Dict[str, Any]:
        """Fail the cluster over, letting RDS pick the new writer."""
        identifier = self._cluster_identifier()
        logger.info(f'Initiating failover for Aurora cluster {identifier}')
        response = await asyncio.to_thread(
            self.client.failover_db_cluster, **self.failover_cluster_params
        )
        logger.success(SUCCESS_FAILOVER.format(f'Aurora cluster {identifier}'))
        return response

    async def failover_random_one_readonly_endpoint(self) -> Optional[Dict[str, Any]]:
        """Fail the cluster over to a randomly chosen reader instance.

        Returns:
            The raw FailoverDBCluster response, or None when the cluster has no reader
        """
        identifier = self._cluster_identifier()
        cluster = await self.describe()
        readers = [
            member.db_instance_identifier
            for member in (cluster.db_cluster_members if cluster else [])
            if not member.is_cluster_writer
        ]
        if not readers:
            logger.warning(f'Aurora cluster {identifier} has no reader to fail over to')
            return None

        target = random.choice(readers)
        logger.info(f'Initiating failover for Aurora cluster {identifier} to {target}')
        response = await asyncio.to_thread(
            self.client.failover_db_cluster,
            **dict(self.failover_cluster_params, TargetDBInstanceIdentifier=target),
        )
        logger.success(SUCCESS_FAILOVER.format(f'Aurora cluster {identifier}'))
        return response

    async def new_readonly_endpoint(self) -> Dict[str, Any]:
        """Create a custom reader endpoint for the cluster."""
        self._cluster_identifier()
        endpoint = self.create_endpoint_params.get('DBClusterEndpointIdentifier')
        if not endpoint:
            raise ParameterRequiredException('DBClusterEndpointIdentifier')

        logger.info(f'Creating reader endpoint {endpoint}')
        response = await asyncio.to_thread(
            self.client.create_db_cluster_endpoint, **self.create_endpoint_params
        )
        logger.success(SUCCESS_CREATED.format(f'reader endpoint {endpoint}'))
        return response

    async def delete(self):
        """Delete every member instance, then the cluster.

        Raises:
            ParameterRequiredException: If no final snapshot identifier is set
                while final snapshots are not skipped
        """
        skip = self.delete_cluster_params.get('SkipFinalSnapshot', False)
        if not skip and not self.delete_cluster_params.get('FinalDBSnapshotIdentifier'):
            raise ParameterRequiredException(
                'FinalDBSnapshotIdentifier', ERROR_FINAL_SNAPSHOT_REQUIRED
            )

        identifier = self._cluster_identifier()
        upsert_filter(self.describe_instance_params, FILTER_DB_CLUSTER_ID, [identifier])
        response = await asyncio.to_thread(
            self.client.describe_db_instances, **self.describe_instance_params
        )

        for instance in response.get('DBInstances', []):
            name = instance.get('DBInstanceIdentifier')
            logger.info(f'Deleting Aurora instance {name}')
            await asyncio.to_thread(
                self.client.delete_db_instance,
                **dict(self.delete_instance_params, DBInstanceIdentifier=name),
            )
            logger.success(SUCCESS_DELETED.format(f'Aurora instance {name}'))

        logger.info(f'Deleting Aurora cluster {identifier}')
        await asyncio.to_thread(self.client.delete_db_cluster, **self.delete_cluster_params)
        logger.success(SUCCESS_DELETED.format(f'Aurora cluster {identifier}'))

    async def describe(self) -> Optional[DescCluster]:
        """Describe the cluster; a missing cluster raises the AWS error.

        Returns:
            The cluster summary, or None when the response holds no cluster
        """
        response = await asyncio.to_thread(
            self.client.describe_db_clusters, **self.describe_cluster_params
        )
        cluster = first_item(response, 'DBClusters')
        return convert_db_cluster(cluster) if cluster else None
