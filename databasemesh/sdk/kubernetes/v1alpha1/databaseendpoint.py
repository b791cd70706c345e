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

"""DatabaseEndpoint: a backend database reachable by the mesh."""

from .meta import KubeModel, Resource, ResourceList
from pydantic import Field
from typing import ClassVar, List, Optional


class MySQL(KubeModel):
    """Connection settings of a MySQL backend."""

    host: str = ''
    port: int = 0
    user: str = ''
    password: str = ''
    db: str = ''


class Database(KubeModel):
    """Backend data source; MySQL is the only supported type."""

    mysql: Optional[MySQL] = Field(None, alias='MySQL')


class DatabaseEndpointSpec(KubeModel):
    database: Database = Field(default_factory=Database)


class DatabaseEndpointStatus(KubeModel):
    pass


class DatabaseEndpoint(Resource):
    plural: ClassVar[str] = 'databaseendpoints'

    kind: str = 'DatabaseEndpoint'
    spec: DatabaseEndpointSpec = Field(default_factory=DatabaseEndpointSpec)
    status: DatabaseEndpointStatus = Field(default_factory=DatabaseEndpointStatus)


class DatabaseEndpointList(ResourceList):
    kind: str = 'DatabaseEndpointList'
    items: List[DatabaseEndpoint] = Field(default_factory=list)
