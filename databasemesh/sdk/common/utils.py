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

"""General utility functions for the Database Mesh SDK."""

from .context import SDKContext
from botocore.client import BaseClient
from botocore.exceptions import ClientError
from typing import Any, Callable, Dict, List, Optional, TypeVar


T = TypeVar('T', bound=object)


def get_error_code(error: ClientError) -> str:
    """Extract the AWS error code from a client error.

    Args:
        error: The botocore client error

    Returns:
        The error code, or an empty string when the response carries none
    """
    return error.response.get('Error', {}).get('Code', '')


def handle_paginated_aws_api_call(
    client: BaseClient,
    paginator_name: str,
    operation_parameters: Dict[str, Any],
    format_function: Callable[[Any], T],
    result_key: str,
    capped: bool = True,
) -> List[T]:
    """Fetch all results using AWS API pagination.

    Args:
        client: Boto3 client to use for the API call
        paginator_name: Name of the paginator to use (e.g. 'list_objects')
        operation_parameters: Parameters to pass to the paginator
        format_function: Function to format each item in the result
        result_key: Key in the response that contains the list of items
        capped: Stop after ``SDKContext.max_items()`` items when true

    Returns:
        List of formatted results
    """
    results = []
    paginator = client.get_paginator(paginator_name)
    params = dict(operation_parameters)
    if capped:
        params['PaginationConfig'] = SDKContext.get_pagination_config()
    page_iterator = paginator.paginate(**params)
    for page in page_iterator:
        for item in page.get(result_key, []) or []:
            results.append(format_function(item))

    return results


def upsert_filter(params: Dict[str, Any], name: str, values: List[str]) -> Dict[str, Any]:
    """Set the values of a describe filter, adding the filter when missing.

    Args:
        params: The request parameters holding a ``Filters`` list
        name: The filter name (e.g. 'db-cluster-id')
        values: The filter values

    Returns:
        The updated request parameters
    """
    filters = params.setdefault('Filters', [])
    for item in filters:
        if item.get('Name') == name:
            item['Values'] = list(values)
            return params

    filters.append({'Name': name, 'Values': list(values)})
    return params


def first_item(response: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    """Return the first element of a list in an AWS response.

    Args:
        response: Raw AWS API response
        key: Key of the list in the response (e.g. 'DBInstances')

    Returns:
        The first element, or None when the list is missing or empty
    """
    items = response.get(key) or []
    return items[0] if items else None
