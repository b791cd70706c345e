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

"""QoSClaim: traffic quality of service requested for a virtual database."""

from .meta import KubeModel, Resource, ResourceList
from pydantic import Field
from typing import ClassVar, List, Optional


class QoSGroup(KubeModel):
    """Bandwidth guarantee (rate) and limit (ceil), e.g. ``10mbps``."""

    rate: Optional[str] = None
    ceil: Optional[str] = None


class TrafficQoS(KubeModel):
    name: str = ''
    qos_group: QoSGroup = Field(default_factory=QoSGroup, alias='qos_group')


class QoSClaimSpec(KubeModel):
    traffic_qos: TrafficQoS = Field(default_factory=TrafficQoS, alias='trafficQoS')


class QoSClaimStatus(KubeModel):
    pass


class QoSClaim(Resource):
    plural: ClassVar[str] = 'qosclaims'

    kind: str = 'QoSClaim'
    spec: QoSClaimSpec = Field(default_factory=QoSClaimSpec)
    status: QoSClaimStatus = Field(default_factory=QoSClaimStatus)


class QoSClaimList(ResourceList):
    kind: str = 'QoSClaimList'
    items: List[QoSClaim] = Field(default_factory=list)
