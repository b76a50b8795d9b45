"""
Shared fixtures building Kubernetes model objects
"""
import logging
import pytest
from kubernetes import client


def build_pod(
    name="pod",
    cpu=None,
    memory=None,
    phase="Pending",
    scheduled=None,
    nominated_node=None,
    node_name=None,
    owner_kinds=None,
    annotations=None,
    init_containers=None,
    overhead=None,
):
    """Build a V1Pod with a single container requesting cpu/memory"""
    requests = {}
    if cpu is not None:
        requests['cpu'] = cpu
    if memory is not None:
        requests['memory'] = memory
    
    conditions = None
    if scheduled is not None:
        conditions = [client.V1PodCondition(type='PodScheduled', status=scheduled)]
    
    owner_references = None
    if owner_kinds:
        owner_references = [
            client.V1OwnerReference(api_version='apps/v1', kind=kind, name=f'{name}-owner', uid=f'uid-{i}')
            for i, kind in enumerate(owner_kinds)
        ]
    
    return client.V1Pod(
        metadata=client.V1ObjectMeta(
            name=name,
            namespace='default',
            owner_references=owner_references,
            annotations=annotations
        ),
        spec=client.V1PodSpec(
            containers=[
                client.V1Container(
                    name='main',
                    resources=client.V1ResourceRequirements(requests=requests or None)
                )
            ],
            init_containers=init_containers,
            node_name=node_name,
            overhead=overhead
        ),
        status=client.V1PodStatus(
            phase=phase,
            conditions=conditions,
            nominated_node_name=nominated_node
        )
    )


def build_node(name, cpu, memory):
    """Build a V1Node with the given allocatable resources"""
    return client.V1Node(
        metadata=client.V1ObjectMeta(name=name),
        status=client.V1NodeStatus(allocatable={'cpu': cpu, 'memory': memory, 'pods': '110'})
    )


@pytest.fixture
def make_pod():
    return build_pod


@pytest.fixture
def make_node():
    return build_node


@pytest.fixture
def restore_root_logger():
    """Put back the root logger handlers replaced by setup_structured_logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    propagate = root.propagate
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    root.propagate = propagate
