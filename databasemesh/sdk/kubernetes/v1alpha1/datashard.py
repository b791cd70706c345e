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

"""DataShard: sharding rules of the tables behind a virtual database."""

from .meta import KubeModel, Resource, ResourceList
from .trafficstrategy import ReadWriteSplittingRule
from pydantic import Field
from typing import ClassVar, List, Optional


class TableStrategy(KubeModel):
    table_sharding_algorithm_name: str = ''
    table_sharding_column: str = ''
    sharding_count: int = 0


class DatabaseStrategy(KubeModel):
    database_sharding_algorithm_name: str = ''
    database_sharding_column: str = ''


class DatabaseTableStrategy(TableStrategy, DatabaseStrategy):
    """Shards across databases and tables at once."""


class ValueFromReadWriteSplitting(KubeModel):
    name: Optional[str] = None


class ValueFrom(KubeModel):
    """A data node given literally or by a read-write splitting group name."""

    value: Optional[str] = None
    value_from_read_write_splitting: Optional[ValueFromReadWriteSplitting] = None


class ActualDatanodesExpressionValue(KubeModel):
    expression: Optional[str] = None


class ActualDatanodesNodeValue(KubeModel):
    nodes: Optional[List[ValueFrom]] = None


class ValueSourceType(ActualDatanodesExpressionValue, ActualDatanodesNodeValue):
    """Data nodes as an inline expression or as an explicit node list."""


class ActualDatanodesValue(KubeModel):
    value_source: Optional[ValueSourceType] = None


class ReadWriteSplittingGroup(KubeModel):
    name: str
    rules: Optional[List[ReadWriteSplittingRule]] = None


class ShardingRule(KubeModel):
    """Sharding rule of one logical table."""

    table_name: str
    read_write_splitting_group: Optional[List[ReadWriteSplittingGroup]] = None
    actual_datanodes: ActualDatanodesValue = Field(default_factory=ActualDatanodesValue)
    table_strategy: Optional[TableStrategy] = None
    database_strategy: Optional[DatabaseStrategy] = None
    database_table_strategy: Optional[DatabaseTableStrategy] = None


class DataShardSpec(KubeModel):
    rules: List[ShardingRule] = Field(default_factory=list)


class DataShardStatus(KubeModel):
    pass


class DataShard(Resource):
    plural: ClassVar[str] = 'datashards'

    kind: str = 'DataShard'
    spec: DataShardSpec = Field(default_factory=DataShardSpec)
    status: DataShardStatus = Field(default_factory=DataShardStatus)


class DataShardList(ResourceList):
    kind: str = 'DataShardList'
    items: List[DataShard] = Field(default_factory=list)
