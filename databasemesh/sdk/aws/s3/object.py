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

"""Fluent builder for Amazon S3 objects."""

import asyncio
from ...common.constants import S3_DELETE_OBJECTS_MAX_KEYS, SUCCESS_DELETED
from ...common.utils import handle_paginated_aws_api_call
from ...exceptions import ParameterRequiredException
from .models import DescObject
from loguru import logger
from typing import IO, Any, Dict, List, Union


def _as_folder(name: str) -> str:
    return name if name.endswith('/') else name + '/'


class Object:
    """S3 object builder.

    ``set_bucket`` and ``set_key`` apply to every object operation; the key
    also acts as the listing prefix until ``set_prefix`` overrides it.
    """

    def __init__(self, client: Any):
        self.client = client
        self.put_params: Dict[str, Any] = {}
        self.get_params: Dict[str, Any] = {}
        self.list_params: Dict[str, Any] = {}
        self.delete_params: Dict[str, Any] = {}
        self.head_params: Dict[str, Any] = {}
        self.folder_name = ''

    def _all_params(self):
        return (
            self.put_params,
            self.get_params,
            self.list_params,
            self.delete_params,
            self.head_params,
        )

    def set_bucket(self, bucket: str) -> 'Object':
        for params in self._all_params():
            params['Bucket'] = bucket
        return self

    def set_key(self, key: str) -> 'Object':
        for params in (self.put_params, self.get_params, self.delete_params, self.head_params):
            params['Key'] = key
        self.list_params['Prefix'] = key
        return self

    def set_value(self, value: str) -> 'Object':
        self.put_params['Body'] = value.encode('utf-8')
        return self

    def set_reader(self, reader: Union[bytes, IO]) -> 'Object':
        self.put_params['Body'] = reader
        return self

    def set_acl(self, acl: str) -> 'Object':
        """Set a canned ACL such as ``private`` or ``public-read``."""
        self.put_params['ACL'] = acl
        return self

    def set_prefix(self, prefix: str) -> 'Object':
        self.list_params['Prefix'] = _as_folder(prefix)
        return self

    def set_folder_name(self, folder_name: str) -> 'Object':
        self.folder_name = _as_folder(folder_name)
        return self

    async def put(self) -> Dict[str, Any]:
        """Upload the object body."""
        logger.info(f'Putting S3 object {self.put_params.get("Key")}')
        return await asyncio.to_thread(self.client.put_object, **self.put_params)

    async def get(self) -> str:
        """Download the object and decode its body as UTF-8 text.

        Bytes that are not valid UTF-8 are replaced with U+FFFD, so any body
        can be read.
        """
        response = await asyncio.to_thread(self.client.get_object, **self.get_params)
        body = response['Body']
        try:
            data = await asyncio.to_thread(body.read)
        finally:
            body.close()
        return data.decode('utf-8', errors='replace')

    async def list(self) -> List[str]:
        """List the keys under the prefix, leaving out the prefix key itself."""
        prefix = self.list_params.get('Prefix', '')
        keys = await asyncio.to_thread(
            handle_paginated_aws_api_call,
            client=self.client,
            paginator_name='list_objects',
            operation_parameters=self.list_params,
            format_function=lambda item: item['Key'],
            result_key='Contents',
            capped=False,
        )
        return [key for key in keys if key != prefix]

    async def delete(self) -> Dict[str, Any]:
        """Delete the object."""
        key = self.delete_params.get('Key')
        logger.info(f'Deleting S3 object {key}')
        response = await asyncio.to_thread(self.client.delete_object, **self.delete_params)
        logger.success(SUCCESS_DELETED.format(f'S3 object {key}'))
        return response

    async def head(self) -> DescObject:
        """Fetch the object metadata without its body."""
        response = await asyncio.to_thread(self.client.head_object, **self.head_params)
        return DescObject(
            key=self.head_params.get('Key', ''),
            content_length=response.get('ContentLength', 0),
            content_type=response.get('ContentType', ''),
            etag=response.get('ETag', ''),
            last_modified=response.get('LastModified'),
            metadata=response.get('Metadata', {}),
        )

    async def delete_folder(self) -> int:
        """Delete every object under the folder name.

        Keys are removed with DeleteObjects in batches of at most 1000.

        Returns:
            The number of keys submitted for deletion
        """
        bucket = self.delete_params.get('Bucket')
        if not bucket:
            raise ParameterRequiredException('Bucket')

        self.set_prefix(self.folder_name)
        keys = await self.list()
        for start in range(0, len(keys), S3_DELETE_OBJECTS_MAX_KEYS):
            batch = keys[start : start + S3_DELETE_OBJECTS_MAX_KEYS]
            await asyncio.to_thread(
                self.client.delete_objects,
                Bucket=bucket,
                Delete={'Objects': [{'Key': key} for key in batch]},
            )

        if keys:
            logger.success(SUCCESS_DELETED.format(f'{len(keys)} objects under {self.folder_name}'))
        return len(keys)
