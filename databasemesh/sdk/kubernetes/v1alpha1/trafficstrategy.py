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

"""TrafficStrategy: load balancing and protection rules for SQL traffic."""

from .meta import KubeModel, LabelSelector, Resource, ResourceList
from enum import Enum
from pydantic import Field
from typing import ClassVar, List, Optional


class RuleType(str, Enum):
    """Kind of a static read-write splitting rule."""

    REGEX = 'regex'


class LoadBalanceAlgorithm(str, Enum):
    RANDOM = 'random'
    ROUND_ROBIN = 'roundrobin'


class ReadWriteSplittingRule(KubeModel):
    """Routes statements matching the regexes to a target or an algorithm."""

    name: str
    type: RuleType = RuleType.REGEX
    regex: Optional[List[str]] = None
    target: Optional[str] = None
    algorithm_name: LoadBalanceAlgorithm = LoadBalanceAlgorithm.RANDOM


class ReadWriteSplittingStatic(KubeModel):
    default_target: Optional[str] = None
    rules: Optional[List[ReadWriteSplittingRule]] = None


class Probe(KubeModel):
    period_milliseconds: int = 0
    timeout_milliseconds: int = 0
    failure_threshold: int = 0
    success_threshold: int = 0


class ConnectionProbe(Probe):
    pass


class PingProbe(Probe):
    pass


class ReadOnlyProbe(Probe):
    pass


class ReplicationLagProbe(Probe):
    max_replication_lag: int = 0


class MasterHighAvailability(KubeModel):
    """Credentials and probes used to discover the current primary."""

    user: str = ''
    password: str = ''
    monitor_interval: int = 0
    connection_probe: Optional[ConnectionProbe] = None
    ping_probe: Optional[PingProbe] = None
    replication_lag_probe: Optional[ReplicationLagProbe] = None
    read_only_probe: Optional[ReadOnlyProbe] = None


class ReadWriteDiscovery(KubeModel):
    master_high_availability: Optional[MasterHighAvailability] = None


class ReadWriteSplittingDynamic(KubeModel):
    default_target: Optional[str] = None
    rules: Optional[List[ReadWriteSplittingRule]] = None
    discovery: ReadWriteDiscovery = Field(default_factory=ReadWriteDiscovery)


class ReadWriteSplitting(KubeModel):
    """Static or discovery based read-write splitting."""

    static: Optional[ReadWriteSplittingStatic] = None
    dynamic: Optional[ReadWriteSplittingDynamic] = None


class SimpleLoadBalance(KubeModel):
    kind: LoadBalanceAlgorithm = LoadBalanceAlgorithm.RANDOM


class LoadBalance(KubeModel):
    read_write_splitting: Optional[ReadWriteSplitting] = None
    simple_load_balance: Optional[SimpleLoadBalance] = None


class CircuitBreak(KubeModel):
    """Statements matching any of the regexes are denied."""

    regex: List[str] = Field(default_factory=list)


class ConcurrencyControl(KubeModel):
    """Caps concurrent statements matching the regexes.

    ``duration`` is in nanoseconds, the JSON form of a Go ``time.Duration``.
    """

    regex: List[str] = Field(default_factory=list)
    duration: int = 0
    max_concurrency: int = 0


class TrafficStrategySpec(KubeModel):
    selector: Optional[LabelSelector] = None
    load_balance: Optional[LoadBalance] = None
    circuit_breaks: Optional[List[CircuitBreak]] = None
    concurrency_controls: Optional[List[ConcurrencyControl]] = None


class TrafficStrategy(Resource):
    plural: ClassVar[str] = 'trafficstrategies'

    kind: str = 'TrafficStrategy'
    spec: TrafficStrategySpec = Field(default_factory=TrafficStrategySpec)


class TrafficStrategyList(ResourceList):
    kind: str = 'TrafficStrategyList'
    items: List[TrafficStrategy] = Field(default_factory=list)
