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

"""Constants for the Database Mesh SDK."""

# Version
SDK_VERSION = '0.1.0'
SDK_USER_AGENT = f'DatabaseMeshSDK/{SDK_VERSION}'

# Error Messages
ERROR_PARAMETER_REQUIRED = 'Missing required parameter: {}'
ERROR_FINAL_SNAPSHOT_REQUIRED = (
    'final snapshot identifier is required when skip final snapshot is false'
)
ERROR_BUCKET_NOT_FOUND = 'Bucket not found: {}'
ERROR_EMPTY_TEE_OPTIONS = 'At least one tee option is required'

# Success Messages
SUCCESS_CREATED = 'Successfully created {}'
SUCCESS_DELETED = 'Successfully deleted {}'
SUCCESS_REBOOTED = 'Successfully rebooted {}'
SUCCESS_RESTORED = 'Successfully restored {}'
SUCCESS_FAILOVER = 'Successfully initiated failover for {}'

# AWS error codes treated as non-fatal
ERROR_CODES_DB_INSTANCE_NOT_FOUND = ('DBInstanceNotFound', 'DBInstanceNotFoundFault')
ERROR_CODES_DB_CLUSTER_NOT_FOUND = ('DBClusterNotFoundFault', 'DBClusterNotFound')
ERROR_CODES_BUCKET_ALREADY_OWNED = ('BucketAlreadyOwnedByYou',)

# AWS RDS describe filter names
FILTER_DB_CLUSTER_ID = 'db-cluster-id'

# AWS RDS cluster endpoint types
ENDPOINT_TYPE_READER = 'READER'

# Naming pattern for Aurora member instances
AURORA_INSTANCE_NAME_FORMAT = '{cluster}-instance-{index}'

# S3 DeleteObjects accepts at most this many keys per request
S3_DELETE_OBJECTS_MAX_KEYS = 1000

# Default config values
DEFAULT_MAX_ITEMS = 100
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_MODE = 'standard'
DEFAULT_CONNECT_TIMEOUT = 5
DEFAULT_READ_TIMEOUT = 10
DEFAULT_STORE_PATH = './bolt.db'
