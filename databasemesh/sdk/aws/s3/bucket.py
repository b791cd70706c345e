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

"""Fluent builder for Amazon S3 buckets."""

import asyncio
from ...common.constants import ERROR_CODES_BUCKET_ALREADY_OWNED, SUCCESS_CREATED, SUCCESS_DELETED
from ...common.decorator import tolerate_error_codes
from .models import DescBucket
from loguru import logger
from typing import IO, Any, Dict, List, Optional, Union


class Bucket:
    """S3 bucket builder."""

    def __init__(self, client: Any):
        self.client = client
        self.create_params: Dict[str, Any] = {}
        self.delete_params: Dict[str, Any] = {}
        self.upload_part_params: Dict[str, Any] = {}

    def set_bucket(self, bucket: str) -> 'Bucket':
        for params in (self.create_params, self.delete_params, self.upload_part_params):
            params['Bucket'] = bucket
        return self

    def set_upload_body_reader(self, body: Union[bytes, IO]) -> 'Bucket':
        self.upload_part_params['Body'] = body
        return self

    def set_key(self, key: str) -> 'Bucket':
        self.upload_part_params['Key'] = key
        return self

    def set_part_number(self, part_number: int) -> 'Bucket':
        self.upload_part_params['PartNumber'] = part_number
        return self

    def set_upload_id(self, upload_id: str) -> 'Bucket':
        self.upload_part_params['UploadId'] = upload_id
        return self

    def set_bucket_location_constraint(self, location: str) -> 'Bucket':
        """Create the bucket in ``location`` instead of us-east-1."""
        self.create_params['CreateBucketConfiguration'] = {'LocationConstraint': location}
        return self

    @tolerate_error_codes(ERROR_CODES_BUCKET_ALREADY_OWNED)
    async def create(self) -> Optional[Dict[str, Any]]:
        """Create the bucket. A bucket already owned by the caller counts as created."""
        bucket = self.create_params.get('Bucket')
        logger.info(f'Creating S3 bucket {bucket}')
        response = await asyncio.to_thread(self.client.create_bucket, **self.create_params)
        logger.success(SUCCESS_CREATED.format(f'S3 bucket {bucket}'))
        return response

    async def list(self) -> List[DescBucket]:
        """List every bucket owned by the caller."""
        response = await asyncio.to_thread(self.client.list_buckets)
        return [
            DescBucket(name=bucket.get('Name', ''), creation_date=bucket.get('CreationDate'))
            for bucket in response.get('Buckets', [])
        ]

    async def delete(self) -> Dict[str, Any]:
        """Delete the bucket; it must be empty."""
        bucket = self.delete_params.get('Bucket')
        logger.info(f'Deleting S3 bucket {bucket}')
        response = await asyncio.to_thread(self.client.delete_bucket, **self.delete_params)
        logger.success(SUCCESS_DELETED.format(f'S3 bucket {bucket}'))
        return response

    async def upload_part(self) -> Dict[str, Any]:
        """Upload one part of a multipart upload.

        Returns:
            The raw UploadPart response, holding the ETag of the part
        """
        return await asyncio.to_thread(self.client.upload_part, **self.upload_part_params)
