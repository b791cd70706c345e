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

"""Custom exceptions for the Database Mesh SDK."""

from .common.constants import (
    ERROR_BUCKET_NOT_FOUND,
    ERROR_EMPTY_TEE_OPTIONS,
    ERROR_PARAMETER_REQUIRED,
)


class DBMeshSDKException(Exception):
    """Base exception for the Database Mesh SDK."""

    pass


class ParameterRequiredException(DBMeshSDKException):
    """Exception raised when an operation runs before a required field is set."""

    def __init__(self, parameter: str, message: str = None):
        """Initialize the ParameterRequiredException.

        Args:
            parameter: The name of the AWS request parameter that is missing
            message: Optional message overriding the default one
        """
        self.parameter = parameter
        super().__init__(message or ERROR_PARAMETER_REQUIRED.format(parameter))


class BucketNotFoundException(DBMeshSDKException):
    """Exception raised when a key-value store bucket does not exist."""

    def __init__(self, bucket: str):
        """Initialize the BucketNotFoundException.

        Args:
            bucket: The name of the missing bucket
        """
        self.bucket = bucket
        super().__init__(ERROR_BUCKET_NOT_FOUND.format(bucket))


class InvalidTeeOptionsException(DBMeshSDKException):
    """Exception raised when a tee logger is built without any sink."""

    def __init__(self):
        """Initialize the InvalidTeeOptionsException."""
        super().__init__(ERROR_EMPTY_TEE_OPTIONS)


class LoggerPanic(DBMeshSDKException):
    """Exception raised by ``Logger.panic`` after the entry has been written."""

    pass
