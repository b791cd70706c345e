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

"""Context management for the Database Mesh SDK."""

import os
from .constants import DEFAULT_MAX_ITEMS
from typing import Any, Dict, Optional


class SDKContext:
    """Process-wide settings shared by every client built by the SDK."""

    _max_items = int(os.environ.get('DBMESH_MAX_ITEMS', DEFAULT_MAX_ITEMS))
    _endpoint_url: Optional[str] = os.environ.get('DBMESH_ENDPOINT_URL') or None

    @classmethod
    def initialize(cls, max_items: int = DEFAULT_MAX_ITEMS, endpoint_url: Optional[str] = None):
        """Initialize the context.

        Args:
            max_items (int): Maximum number of items fetched by paginated calls. Defaults to 100.
            endpoint_url (Optional[str]): Custom endpoint URL for AWS API calls. Defaults to None.
        """
        cls._max_items = max_items
        cls._endpoint_url = endpoint_url

    @classmethod
    def max_items(cls) -> int:
        """Get the maximum number of items fetched by paginated calls.

        Returns:
            The maximum number of items fetched by paginated calls
        """
        return cls._max_items

    @classmethod
    def endpoint_url(cls) -> Optional[str]:
        """Get the custom endpoint URL for AWS API calls.

        Returns:
            The custom endpoint URL, or None if using default AWS endpoints
        """
        return cls._endpoint_url

    @classmethod
    def get_pagination_config(cls) -> Dict[str, Any]:
        """Get the pagination config applied to paginated calls.

        Returns:
            The pagination config applied to paginated calls
        """
        return {
            'MaxItems': cls._max_items,
        }
