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

"""Result models returned by the S3 builders."""

from datetime import datetime
from pydantic import BaseModel, Field
from typing import Dict, Optional


class DescBucket(BaseModel):
    """S3 bucket summary."""

    name: str = Field('', description='Name of the bucket')
    creation_date: Optional[datetime] = Field(None, description='Creation time of the bucket')


class DescObject(BaseModel):
    """S3 object metadata, as returned by HeadObject."""

    key: str = Field('', description='Key of the object')
    content_length: int = Field(0, description='Size of the body in bytes')
    content_type: str = Field('', description='MIME type of the body')
    etag: str = Field('', description='Entity tag of the object')
    last_modified: Optional[datetime] = Field(None, description='Time of the last write')
    metadata: Dict[str, str] = Field(default_factory=dict, description='User-defined metadata')
