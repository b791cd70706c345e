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

"""Amazon S3 builders."""

import boto3
from ...common.connection import S3ClientFactory
from .bucket import Bucket
from .models import DescBucket, DescObject
from .object import Object


class S3Service:
    """Entry point holding one S3 client and its builders."""

    def __init__(self, session: boto3.Session):
        self.client = S3ClientFactory.create_client(session)
        self._bucket = Bucket(self.client)
        self._object = Object(self.client)

    def bucket(self) -> Bucket:
        """Return the bucket builder."""
        return self._bucket

    def object(self) -> Object:
        """Return the object builder."""
        return self._object


__all__ = ['Bucket', 'DescBucket', 'DescObject', 'Object', 'S3Service']
