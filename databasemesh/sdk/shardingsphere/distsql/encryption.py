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

"""Encryption rule statements.

Example:
    CreateEncryptRule(
        if_not_exists=True,
        encrypt_definitions=[
            EncryptDefinition(
                name='t_encrypt',
                columns=[
                    Column(
                        name='user_id',
                        cipher='user_cipher',
                        encryption_algorithm=EncryptionAlgorithm(name='MD5'),
                    )
                ],
            )
        ],
    ).to_distsql()

renders::

    CREATE ENCRYPT RULE IF NOT EXISTS t_encrypt (COLUMNS((NAME=user_id,
    CIPHER=user_cipher, ENCRYPT_ALGORITHM(TYPE(NAME='MD5')))),
    QUERY_WITH_CIPHER_COLUMN=true);

(on a single line).
"""

from pydantic import BaseModel, Field
from typing import ClassVar, Dict, List, Optional


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class AlgorithmType(BaseModel):
    """An algorithm and its properties; properties render in key order."""

    name: str = Field(..., description='Algorithm type name, e.g. AES or MD5')
    properties: Dict[str, str] = Field(default_factory=dict, description='Algorithm properties')

    def to_distsql(self) -> str:
        body = f'NAME={_quote(self.name)}'
        if self.properties:
            props = ', '.join(
                f'{_quote(key)}={_quote(value)}' for key, value in sorted(self.properties.items())
            )
            body = f'{body}, PROPERTIES({props})'
        return f'TYPE({body})'


class _WrappedAlgorithm(AlgorithmType):
    keyword: ClassVar[str] = ''

    def to_distsql(self) -> str:
        return f'{self.keyword}({super().to_distsql()})'


class EncryptionAlgorithm(_WrappedAlgorithm):
    keyword: ClassVar[str] = 'ENCRYPT_ALGORITHM'


class AssistedQueryAlgorithm(_WrappedAlgorithm):
    keyword: ClassVar[str] = 'ASSISTED_QUERY_ALGORITHM'


class LikeQueryAlgorithm(_WrappedAlgorithm):
    keyword: ClassVar[str] = 'LIKE_QUERY_ALGORITHM'


class Column(BaseModel):
    """A logical column and the physical columns and algorithms backing it."""

    name: str = Field(..., description='Logical column name')
    plain: Optional[str] = Field(None, description='Column keeping the plain text')
    cipher: Optional[str] = Field(None, description='Column keeping the cipher text')
    assisted_query_column: Optional[str] = Field(None, description='Assisted query column')
    like_query_column: Optional[str] = Field(None, description='Like query column')
    encryption_algorithm: Optional[EncryptionAlgorithm] = None
    assisted_query_algorithm: Optional[AssistedQueryAlgorithm] = None
    like_query_algorithm: Optional[LikeQueryAlgorithm] = None

    def to_distsql(self) -> str:
        parts = [f'NAME={self.name}']
        for keyword, value in (
            ('PLAIN', self.plain),
            ('CIPHER', self.cipher),
            ('ASSISTED_QUERY_COLUMN', self.assisted_query_column),
            ('LIKE_QUERY_COLUMN', self.like_query_column),
        ):
            if value:
                parts.append(f'{keyword}={value}')

        for algorithm in (
            self.encryption_algorithm,
            self.assisted_query_algorithm,
            self.like_query_algorithm,
        ):
            if algorithm is not None:
                parts.append(algorithm.to_distsql())

        return ', '.join(parts)


class EncryptDefinition(BaseModel):
    """Encryption settings of one table."""

    name: str = Field(..., description='Table name')
    columns: List[Column] = Field(default_factory=list, description='Encrypted columns')
    query_with_cipher_column: bool = Field(
        True, description='Whether queries read the cipher column'
    )

    def to_distsql(self) -> str:
        columns = ', '.join(f'({column.to_distsql()})' for column in self.columns)
        query_with_cipher = 'true' if self.query_with_cipher_column else 'false'
        return f'{self.name} (COLUMNS({columns}), QUERY_WITH_CIPHER_COLUMN={query_with_cipher})'


class EncryptRule(BaseModel):
    """Comma separated list of table encryption definitions."""

    encrypt_definitions: List[EncryptDefinition] = Field(default_factory=list)

    def to_distsql(self) -> str:
        return ', '.join(definition.to_distsql() for definition in self.encrypt_definitions)


class CreateEncryptRule(EncryptRule):
    if_not_exists: bool = False

    def to_distsql(self) -> str:
        if_not_exists = 'IF NOT EXISTS ' if self.if_not_exists else ''
        return f'CREATE ENCRYPT RULE {if_not_exists}{super().to_distsql()};'


class AlterEncryptRule(EncryptRule):
    def to_distsql(self) -> str:
        return f'ALTER ENCRYPT RULE {super().to_distsql()};'


class DropEncryptRule(EncryptRule):
    """Drops the rules of the named tables; only definition names are rendered."""

    if_exists: bool = False

    def to_distsql(self) -> str:
        if_exists = 'IF EXISTS ' if self.if_exists else ''
        names = ', '.join(definition.name for definition in self.encrypt_definitions)
        return f'DROP ENCRYPT RULE {if_exists}{names};'
