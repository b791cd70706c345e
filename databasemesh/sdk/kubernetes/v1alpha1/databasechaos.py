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

"""DatabaseChaos: scheduled fault injection against selected databases."""

from .meta import ConditionStatus, KubeModel, LabelSelector, Resource, ResourceList
from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import ClassVar, List, Optional


class DatabaseChaosAction(str, Enum):
    """Fault injected by a DatabaseChaos."""

    AWS_RDS_INSTANCE_REBOOT = 'aws-rds-instance-reboot'
    AWS_RDS_CLUSTER_FAILOVER = 'aws-rds-cluster-failover'


class DatabaseChaosConditionType(str, Enum):
    SELECTED = 'Selected'
    EXECUTED = 'Executed'
    PAUSED = 'Paused'
    RECOVERED = 'Recovered'


class RecordEventType(str, Enum):
    SUCCEEDED = 'Succeeded'
    FAILED = 'Failed'


class DatabaseChaosSpec(KubeModel):
    """Desired state of a DatabaseChaos."""

    selector: LabelSelector = Field(
        default_factory=LabelSelector, description='Selects the target databases'
    )
    action: DatabaseChaosAction = Field(..., description='Fault to inject')
    schedule: str = Field('', description='Cron schedule of the injection')
    suspend: bool = Field(False, description='Pause further injections')


class DatabaseChaosCondition(KubeModel):
    type: DatabaseChaosConditionType
    status: ConditionStatus
    reason: Optional[str] = None


class DatabaseChaosEvent(KubeModel):
    type: RecordEventType
    message: Optional[str] = None
    timestamp: Optional[datetime] = None


class DatabaseChaosRecord(KubeModel):
    """Outcome of one execution of the chaos action."""

    execution_count: int = 0
    events: Optional[List[DatabaseChaosEvent]] = None


class DatabaseChaosStatus(KubeModel):
    conditions: Optional[List[DatabaseChaosCondition]] = None
    records: Optional[List[DatabaseChaosRecord]] = None


class DatabaseChaos(Resource):
    """Schedules a chaos action against the databases matched by its selector."""

    plural: ClassVar[str] = 'databasechaos'
    short_names: ClassVar[List[str]] = ['dbchaos']

    kind: str = 'DatabaseChaos'
    spec: DatabaseChaosSpec
    status: DatabaseChaosStatus = Field(default_factory=DatabaseChaosStatus)


class DatabaseChaosList(ResourceList):
    kind: str = 'DatabaseChaosList'
    items: List[DatabaseChaos] = Field(default_factory=list)
