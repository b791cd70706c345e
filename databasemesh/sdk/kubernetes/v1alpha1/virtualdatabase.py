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

"""VirtualDatabase: the database applications connect to through the mesh."""

from .meta import KubeModel, Resource, ResourceList
from pydantic import Field
from typing import ClassVar, List, Optional


class DatabaseMySQL(KubeModel):
    """Virtual MySQL server settings."""

    host: Optional[str] = None
    port: Optional[int] = None
    user: Optional[str] = None
    password: Optional[str] = None
    db: Optional[str] = None
    pool_size: Optional[int] = None
    server_version: Optional[str] = None


class DatabaseService(KubeModel):
    """Protocol served by a virtual database; only MySQL is supported."""

    database_mysql: Optional[DatabaseMySQL] = Field(None, alias='databaseMySQL')


class VirtualDatabaseService(DatabaseService):
    """One service of a virtual database and the resources it refers to."""

    name: str
    traffic_strategy: str = ''
    data_shard: Optional[str] = None
    qos_claim: Optional[str] = None


class VirtualDatabaseSpec(KubeModel):
    database_class_name: str = ''
    services: List[VirtualDatabaseService] = Field(default_factory=list)


class VirtualDatabaseStatus(KubeModel):
    """Names of the DatabaseEndpoints backing the virtual database."""

    endpoints: List[str] = Field(default_factory=list)


class VirtualDatabase(Resource):
    plural: ClassVar[str] = 'virtualdatabases'
    short_names: ClassVar[List[str]] = ['vdb']

    kind: str = 'VirtualDatabase'
    spec: VirtualDatabaseSpec = Field(default_factory=VirtualDatabaseSpec)
    status: VirtualDatabaseStatus = Field(default_factory=VirtualDatabaseStatus)


class VirtualDatabaseList(ResourceList):
    kind: str = 'VirtualDatabaseList'
    items: List[VirtualDatabase] = Field(default_factory=list)
