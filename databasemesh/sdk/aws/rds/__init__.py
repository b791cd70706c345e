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

"""Amazon RDS builders."""

import boto3
from ...common.connection import RDSClientFactory
from .aurora import Aurora
from .cluster import Cluster
from .instance import Instance
from .models import (
    ClusterMember,
    DBClusterStatus,
    DBInstanceStatus,
    DescCluster,
    DescClusterSnapshot,
    DescInstance,
    DescInstanceSnapshot,
    Endpoint,
    ParameterGroupStatus,
    ReadReplicaStatus,
)
from typing import Optional


class RDSService:
    """Entry point holding one RDS client and its builders."""

    def __init__(self, session: boto3.Session):
        self.client = RDSClientFactory.create_client(session)
        self._instance: Optional[Instance] = None
        self._cluster: Optional[Cluster] = None
        self._aurora: Optional[Aurora] = None

    def instance(self) -> Instance:
        """Return the DB instance builder."""
        if self._instance is None:
            self._instance = Instance(self.client)
        return self._instance

    def cluster(self) -> Cluster:
        """Return the DB cluster builder."""
        if self._cluster is None:
            self._cluster = Cluster(self.client)
        return self._cluster

    def aurora(self) -> Aurora:
        """Return the Aurora builder."""
        if self._aurora is None:
            self._aurora = Aurora(self.client)
        return self._aurora


__all__ = [
    'Aurora',
    'Cluster',
    'ClusterMember',
    'DBClusterStatus',
    'DBInstanceStatus',
    'DescCluster',
    'DescClusterSnapshot',
    'DescInstance',
    'DescInstanceSnapshot',
    'Endpoint',
    'Instance',
    'ParameterGroupStatus',
    'RDSService',
    'ReadReplicaStatus',
]
