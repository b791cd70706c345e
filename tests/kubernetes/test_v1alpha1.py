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
"""Tests for the v1alpha1 custom resource schemas."""

import pytest
from databasemesh.sdk.kubernetes.v1alpha1 import (
    API_VERSION,
    PROVISIONER_AWS_AURORA,
    RESOURCES,
    ConcurrencyControl,
    DatabaseChaos,
    DatabaseChaosAction,
    DatabaseClass,
    DatabaseClassList,
    DatabaseEndpoint,
    DatabaseReclaimPolicy,
    DataShard,
    OwnerReference,
    QoSClaim,
    QoSClaimList,
    TrafficStrategy,
    TrafficStrategyList,
    VirtualDatabase,
)
from pydantic import ValidationError


class TestResourceRegistration:
    """Test cases for the resource type data of every kind."""

    def test_every_kind_shares_group_version(self):
        for resource in RESOURCES:
            assert resource.group == 'core.database-mesh.io'
            assert resource.version == 'v1alpha1'
            assert resource.plural

    def test_names_and_scopes(self):
        assert DatabaseClass.scope == 'Cluster'
        assert DatabaseClass.short_names == ['dc']
        assert VirtualDatabase.short_names == ['vdb']
        assert DatabaseChaos.plural == 'databasechaos'
        assert DatabaseChaos.short_names == ['dbchaos']
        assert TrafficStrategy.scope == 'Namespaced'


class TestSerialization:
    """Test cases for the camelCase JSON form of the resources."""

    def test_database_class(self):
        """Test defaults and camelCase keys of a DatabaseClass."""
        resource = DatabaseClass(
            metadata={'name': 'aurora-mysql'},
            spec={'provisioner': PROVISIONER_AWS_AURORA, 'parameters': {'engine': 'aurora-mysql'}},
        )

        data = resource.to_dict()

        assert data['apiVersion'] == API_VERSION
        assert data['kind'] == 'DatabaseClass'
        assert data['metadata'] == {'name': 'aurora-mysql'}
        assert data['spec']['reclaimPolicy'] == 'Retain'
        assert data['spec']['provisioner'] == 'databaseclass.database-mesh.io/aws-aurora'

    def test_parse_camel_case(self):
        """Test API JSON parses into snake_case attributes."""
        resource = DatabaseClass.model_validate(
            {
                'apiVersion': API_VERSION,
                'kind': 'DatabaseClass',
                'metadata': {'name': 'rds', 'resourceVersion': '12'},
                'spec': {
                    'provisioner': 'databaseclass.database-mesh.io/aws-rds-instance',
                    'reclaimPolicy': 'DeleteWithFinalSnapshot',
                },
            }
        )

        assert resource.metadata.resource_version == '12'
        assert resource.spec.reclaim_policy is DatabaseReclaimPolicy.DELETE_WITH_FINAL_SNAPSHOT

    def test_metadata_round_trip(self):
        """Test owner references and other server metadata survive a round trip."""
        owners = [
            {
                'apiVersion': 'v1',
                'kind': 'ConfigMap',
                'name': 'owner',
                'uid': 'd9607e19-f88f-11e6-a518-42010a800195',
                'controller': True,
                'blockOwnerDeletion': True,
            }
        ]
        managed = [
            {
                'manager': 'pisanix-controller',
                'operation': 'Update',
                'apiVersion': API_VERSION,
                'fieldsType': 'FieldsV1',
                'fieldsV1': {'f:spec': {'f:provisioner': {}}},
            }
        ]
        resource = DatabaseClass.model_validate(
            {
                'metadata': {
                    'name': 'dc',
                    'ownerReferences': owners,
                    'deletionGracePeriodSeconds': 30,
                    'managedFields': managed,
                    'selfLink': '/apis/core.database-mesh.io/v1alpha1/databaseclasses/dc',
                },
                'spec': {'provisioner': PROVISIONER_AWS_AURORA},
            }
        )

        metadata = resource.to_dict()['metadata']

        assert isinstance(resource.metadata.owner_references[0], OwnerReference)
        assert resource.metadata.owner_references[0].block_owner_deletion is True
        assert metadata['ownerReferences'] == owners
        assert metadata['deletionGracePeriodSeconds'] == 30
        assert metadata['managedFields'] == managed
        assert metadata['selfLink'] == '/apis/core.database-mesh.io/v1alpha1/databaseclasses/dc'

    def test_database_class_requires_provisioner(self):
        with pytest.raises(ValidationError):
            DatabaseClass(spec={})

    def test_database_chaos(self):
        chaos = DatabaseChaos(
            spec={
                'selector': {'matchLabels': {'app': 'orders'}},
                'action': 'aws-rds-cluster-failover',
                'schedule': '*/10 * * * *',
            }
        )

        data = chaos.to_dict()

        assert chaos.spec.action is DatabaseChaosAction.AWS_RDS_CLUSTER_FAILOVER
        assert data['spec']['selector'] == {'matchLabels': {'app': 'orders'}}
        assert data['spec']['suspend'] is False

    def test_database_endpoint_mysql_key(self):
        endpoint = DatabaseEndpoint(
            spec={'database': {'MySQL': {'host': 'db.local', 'port': 3306, 'db': 'orders'}}}
        )

        data = endpoint.to_dict()

        assert endpoint.spec.database.mysql.host == 'db.local'
        assert data['spec']['database']['MySQL']['port'] == 3306

    def test_virtual_database(self):
        vdb = VirtualDatabase(
            spec={
                'databaseClassName': 'aurora-mysql',
                'services': [
                    {
                        'name': 'orders',
                        'trafficStrategy': 'orders-rw',
                        'databaseMySQL': {'host': '0.0.0.0', 'port': 3306, 'poolSize': 10},
                    }
                ],
            }
        )

        service = vdb.spec.services[0]
        assert service.database_mysql.pool_size == 10
        data = vdb.to_dict()
        assert data['spec']['services'][0]['databaseMySQL']['poolSize'] == 10
        assert data['spec']['services'][0]['trafficStrategy'] == 'orders-rw'

    def test_qos_claim_keys(self):
        qos = {'name': 'gold', 'qos_group': {'rate': '10mbps', 'ceil': '20mbps'}}
        claim = QoSClaim(spec={'trafficQoS': qos})

        data = claim.to_dict()

        assert claim.spec.traffic_qos.qos_group.ceil == '20mbps'
        assert data['spec'] == {'trafficQoS': qos}

    def test_traffic_strategy(self):
        strategy = TrafficStrategy(
            spec={
                'loadBalance': {
                    'readWriteSplitting': {
                        'dynamic': {
                            'rules': [{'name': 'reads', 'regex': ['^select']}],
                            'discovery': {
                                'masterHighAvailability': {
                                    'user': 'monitor',
                                    'replicationLagProbe': {'maxReplicationLag': 100},
                                }
                            },
                        }
                    }
                },
                'concurrencyControls': [
                    {'regex': ['^update'], 'duration': 1000000000, 'maxConcurrency': 5}
                ],
            }
        )

        dynamic = strategy.spec.load_balance.read_write_splitting.dynamic
        assert dynamic.rules[0].algorithm_name.value == 'random'
        probe = dynamic.discovery.master_high_availability.replication_lag_probe
        assert probe.max_replication_lag == 100
        assert strategy.spec.concurrency_controls[0] == ConcurrencyControl(
            regex=['^update'], duration=1000000000, max_concurrency=5
        )
        assert strategy.to_dict()['spec']['concurrencyControls'][0]['maxConcurrency'] == 5

    def test_data_shard_inline_structs(self):
        """Test embedded strategies expose the fields of both parents."""
        shard = DataShard(
            spec={
                'rules': [
                    {
                        'tableName': 't_order',
                        'actualDatanodes': {
                            'valueSource': {'expression': 'ds_${0..1}.t_order_${0..1}'}
                        },
                        'databaseTableStrategy': {
                            'databaseShardingColumn': 'user_id',
                            'tableShardingColumn': 'order_id',
                            'shardingCount': 4,
                        },
                    }
                ]
            }
        )

        rule = shard.spec.rules[0]
        assert rule.database_table_strategy.database_sharding_column == 'user_id'
        assert rule.database_table_strategy.sharding_count == 4
        assert rule.actual_datanodes.value_source.expression == 'ds_${0..1}.t_order_${0..1}'
        data = shard.to_dict()['spec']['rules'][0]
        assert data['databaseTableStrategy']['tableShardingColumn'] == 'order_id'


class TestLists:
    """Test cases for resource lists."""

    def test_lists_use_list_metadata(self):
        """Test list metadata carries the continue token."""
        for list_type in (DatabaseClassList, QoSClaimList, TrafficStrategyList):
            parsed = list_type.model_validate(
                {'metadata': {'resourceVersion': '7', 'continue': 'token'}, 'items': []}
            )
            assert parsed.metadata.continue_ == 'token'
            assert parsed.to_dict()['metadata'] == {'resourceVersion': '7', 'continue': 'token'}

    def test_list_kind_and_items(self):
        resources = DatabaseClassList(
            items=[DatabaseClass(metadata={'name': 'a'}, spec={'provisioner': 'p'})]
        )

        data = resources.to_dict()

        assert data['kind'] == 'DatabaseClassList'
        assert data['items'][0]['metadata']['name'] == 'a'
