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

"""Result models returned by the RDS builders, and their converters."""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class DBInstanceStatus(str, Enum):
    """Known DB instance status values."""

    AVAILABLE = 'available'
    BACKING_UP = 'backing-up'
    CREATING = 'creating'
    DELETING = 'deleting'
    FAILED = 'failed'
    MODIFYING = 'modifying'
    REBOOTING = 'rebooting'
    RENAMING = 'renaming'
    STARTING = 'starting'
    STOPPED = 'stopped'
    STOPPING = 'stopping'
    READY = 'Ready'


class DBClusterStatus(str, Enum):
    """Known DB cluster status values."""

    CREATING = 'creating'
    AVAILABLE = 'available'
    DELETING = 'deleting'
    FAILED = 'failed'
    BACKING_UP = 'backing-up'
    BACKTRACKING = 'backtracking'
    CLONING_FAILED = 'cloning-failed'
    FAILING_OVER = 'failing-over'
    MAINTENANCE = 'maintenance'
    MIGRATING = 'migrating'
    MIGRATION_FAILED = 'migration-failed'
    MODIFYING = 'modifying'
    PROMOTING = 'promoting'
    RENAMING = 'renaming'
    STARTING = 'starting'
    STOPPING = 'stopping'
    STOPPED = 'stopped'
    UPGRADING = 'upgrading'


class ReadReplicaStatus(BaseModel):
    """Status information of a read replica."""

    message: str = Field('', description='Details of the error, if any')
    normal: bool = Field(False, description='Whether the replica is operating normally')
    status: str = Field('', description='Status of the replica')
    status_type: str = Field('', description='Type of the status, e.g. read replication')


class Endpoint(BaseModel):
    """DB instance connection endpoint."""

    address: str = Field('', description='DNS address of the instance')
    port: int = Field(0, description='Port the database engine listens on')


class ParameterGroupStatus(BaseModel):
    """DB parameter group attached to an instance."""

    name: str = Field('', description='Name of the DB parameter group')
    apply_status: str = Field('', description='Status of parameter updates')


class DescInstance(BaseModel):
    """Summary of a DB instance."""

    char_set_name: str = Field('', description='Character set of the instance')
    db_instance_arn: str = Field('', description='ARN of the instance')
    db_instance_identifier: str = Field('', description='Identifier of the instance')
    db_instance_status: Union[DBInstanceStatus, str] = Field(
        '', union_mode='left_to_right', description='Current status; unknown values stay str'
    )
    db_name: str = Field('', description='Name of the initial database')
    deletion_protection: bool = Field(False, description='Whether deletion protection is on')
    instance_create_time: Optional[datetime] = Field(None, description='Creation time')
    timezone: str = Field('', description='Time zone of the instance')
    secondary_az: str = Field('', description='Secondary availability zone of a Multi-AZ instance')
    read_replica_source_db_instance_identifier: str = Field(
        '', description='Source instance when this instance is a read replica'
    )
    read_replica_db_instance_identifiers: List[str] = Field(
        default_factory=list, description='Read replicas of this instance'
    )
    read_replica_status_infos: List[ReadReplicaStatus] = Field(
        default_factory=list, description='Status of the read replicas'
    )
    endpoint: Endpoint = Field(default_factory=Endpoint, description='Connection endpoint')
    db_parameter_groups: List[ParameterGroupStatus] = Field(
        default_factory=list, description='Attached DB parameter groups'
    )
    db_cluster_identifier: str = Field('', description='Cluster this instance belongs to')
    read_replica_db_cluster_identifiers: List[str] = Field(
        default_factory=list, description='Clusters replicating from this instance'
    )


class DescInstanceSnapshot(BaseModel):
    """Summary of a DB instance snapshot."""

    db_instance_identifier: str = Field('', description='Instance the snapshot was taken from')
    db_snapshot_arn: str = Field('', description='ARN of the snapshot')
    db_snapshot_identifier: str = Field('', description='Identifier of the snapshot')
    engine: str = Field('', description='Database engine')
    engine_version: str = Field('', description='Database engine version')
    instance_create_time: Optional[datetime] = Field(None, description='Instance creation time')
    percent_progress: int = Field(0, description='Percentage of the data transferred')
    snapshot_create_time: Optional[datetime] = Field(None, description='Snapshot creation time')
    snapshot_database_time: Optional[datetime] = Field(
        None, description='Database time the snapshot reflects'
    )
    snapshot_type: str = Field('', description='Type of the snapshot, e.g. manual')
    status: str = Field('', description='Status of the snapshot')


class ClusterMember(BaseModel):
    """Instance that is a member of a DB cluster."""

    db_cluster_parameter_group_status: str = Field(
        '', description='Status of the cluster parameter group for this member'
    )
    db_instance_identifier: str = Field('', description='Identifier of the member instance')
    is_cluster_writer: bool = Field(False, description='Whether the member is the writer')


class DescCluster(BaseModel):
    """Summary of a DB cluster."""

    char_set_name: str = Field('', description='Character set of the cluster')
    cluster_create_time: Optional[datetime] = Field(None, description='Creation time')
    availability_zones: List[str] = Field(default_factory=list, description='Availability zones')
    custom_endpoints: List[str] = Field(default_factory=list, description='Custom endpoints')
    db_cluster_arn: str = Field('', description='ARN of the cluster')
    db_cluster_identifier: str = Field('', description='Identifier of the cluster')
    db_cluster_members: List[ClusterMember] = Field(
        default_factory=list, description='Member instances'
    )
    db_cluster_parameter_group: str = Field('', description='Cluster parameter group name')
    deletion_protection: bool = Field(False, description='Whether deletion protection is on')
    primary_endpoint: str = Field('', description='Writer endpoint')
    read_replica_identifiers: List[str] = Field(
        default_factory=list, description='Read replicas of this cluster'
    )
    reader_endpoint: str = Field('', description='Load-balanced reader endpoint')
    replication_source_identifier: str = Field(
        '', description='Source when this cluster is a read replica'
    )
    status: Union[DBClusterStatus, str] = Field(
        '', union_mode='left_to_right', description='Current status; unknown values stay str'
    )
    port: int = Field(0, description='Port the database engine listens on')


class DescClusterSnapshot(BaseModel):
    """Summary of a DB cluster snapshot."""

    cluster_create_time: Optional[datetime] = Field(None, description='Cluster creation time')
    db_cluster_identifier: str = Field('', description='Cluster the snapshot was taken from')
    db_cluster_snapshot_arn: str = Field('', description='ARN of the snapshot')
    db_cluster_snapshot_identifier: str = Field('', description='Identifier of the snapshot')
    engine: str = Field('', description='Database engine')
    engine_version: str = Field('', description='Database engine version')
    percent_progress: int = Field(0, description='Percentage of the data transferred')
    snapshot_create_time: Optional[datetime] = Field(None, description='Snapshot creation time')
    snapshot_type: str = Field('', description='Type of the snapshot, e.g. manual')
    status: str = Field('', description='Status of the snapshot')


def convert_db_instance(instance: Dict[str, Any]) -> DescInstance:
    """Convert a DBInstance entry of a DescribeDBInstances response."""
    endpoint = instance.get('Endpoint') or {}
    return DescInstance(
        char_set_name=instance.get('CharacterSetName', ''),
        db_instance_arn=instance.get('DBInstanceArn', ''),
        db_instance_identifier=instance.get('DBInstanceIdentifier', ''),
        db_instance_status=instance.get('DBInstanceStatus', ''),
        db_name=instance.get('DBName', ''),
        deletion_protection=instance.get('DeletionProtection', False),
        instance_create_time=instance.get('InstanceCreateTime'),
        timezone=instance.get('Timezone', ''),
        secondary_az=instance.get('SecondaryAvailabilityZone', ''),
        read_replica_source_db_instance_identifier=instance.get(
            'ReadReplicaSourceDBInstanceIdentifier', ''
        ),
        read_replica_db_instance_identifiers=instance.get('ReadReplicaDBInstanceIdentifiers', []),
        read_replica_status_infos=[
            ReadReplicaStatus(
                message=info.get('Message', ''),
                normal=info.get('Normal', False),
                status=info.get('Status', ''),
                status_type=info.get('StatusType', ''),
            )
            for info in instance.get('StatusInfos', [])
        ],
        endpoint=Endpoint(address=endpoint.get('Address', ''), port=endpoint.get('Port', 0)),
        db_parameter_groups=[
            ParameterGroupStatus(
                name=group.get('DBParameterGroupName', ''),
                apply_status=group.get('ParameterApplyStatus', ''),
            )
            for group in instance.get('DBParameterGroups', [])
        ],
        db_cluster_identifier=instance.get('DBClusterIdentifier', ''),
        read_replica_db_cluster_identifiers=instance.get('ReadReplicaDBClusterIdentifiers', []),
    )


def convert_db_snapshot(snapshot: Dict[str, Any]) -> DescInstanceSnapshot:
    """Convert a DBSnapshot entry of a DescribeDBSnapshots response."""
    return DescInstanceSnapshot(
        db_instance_identifier=snapshot.get('DBInstanceIdentifier', ''),
        db_snapshot_arn=snapshot.get('DBSnapshotArn', ''),
        db_snapshot_identifier=snapshot.get('DBSnapshotIdentifier', ''),
        engine=snapshot.get('Engine', ''),
        engine_version=snapshot.get('EngineVersion', ''),
        instance_create_time=snapshot.get('InstanceCreateTime'),
        percent_progress=snapshot.get('PercentProgress', 0),
        snapshot_create_time=snapshot.get('SnapshotCreateTime'),
        snapshot_database_time=snapshot.get('SnapshotDatabaseTime'),
        snapshot_type=snapshot.get('SnapshotType', ''),
        status=snapshot.get('Status', ''),
    )


def convert_db_cluster(cluster: Dict[str, Any]) -> DescCluster:
    """Convert a DBCluster entry of a DescribeDBClusters response."""
    return DescCluster(
        char_set_name=cluster.get('CharacterSetName', ''),
        cluster_create_time=cluster.get('ClusterCreateTime'),
        availability_zones=cluster.get('AvailabilityZones', []),
        custom_endpoints=cluster.get('CustomEndpoints', []),
        db_cluster_arn=cluster.get('DBClusterArn', ''),
        db_cluster_identifier=cluster.get('DBClusterIdentifier', ''),
        db_cluster_members=[
            ClusterMember(
                db_cluster_parameter_group_status=member.get('DBClusterParameterGroupStatus', ''),
                db_instance_identifier=member.get('DBInstanceIdentifier', ''),
                is_cluster_writer=member.get('IsClusterWriter', False),
            )
            for member in cluster.get('DBClusterMembers', [])
        ],
        db_cluster_parameter_group=cluster.get('DBClusterParameterGroup', ''),
        deletion_protection=cluster.get('DeletionProtection', False),
        primary_endpoint=cluster.get('Endpoint', ''),
        read_replica_identifiers=cluster.get('ReadReplicaIdentifiers', []),
        reader_endpoint=cluster.get('ReaderEndpoint', ''),
        replication_source_identifier=cluster.get('ReplicationSourceIdentifier', ''),
        status=cluster.get('Status', ''),
        port=cluster.get('Port', 0),
    )


def convert_db_cluster_snapshot(snapshot: Dict[str, Any]) -> DescClusterSnapshot:
    """Convert a DBClusterSnapshot entry of a DescribeDBClusterSnapshots response."""
    return DescClusterSnapshot(
        cluster_create_time=snapshot.get('ClusterCreateTime'),
        db_cluster_identifier=snapshot.get('DBClusterIdentifier', ''),
        db_cluster_snapshot_arn=snapshot.get('DBClusterSnapshotArn', ''),
        db_cluster_snapshot_identifier=snapshot.get('DBClusterSnapshotIdentifier', ''),
        engine=snapshot.get('Engine', ''),
        engine_version=snapshot.get('EngineVersion', ''),
        percent_progress=snapshot.get('PercentProgress', 0),
        snapshot_create_time=snapshot.get('SnapshotCreateTime'),
        snapshot_type=snapshot.get('SnapshotType', ''),
        status=snapshot.get('Status', ''),
    )
