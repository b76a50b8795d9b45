"""
Capacity Aggregation
Cluster-wide requested usage and per-node available capacity
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping

from kubernetes import client

from cluster_capacity.attribution import AttributionSource, NOMINATED_NODE, map_pods
from cluster_capacity.pod_requests import compute_pod_resource_request
from cluster_capacity.pod_utils import POD_PENDING, is_pod_using_node_resources
from cluster_capacity.resources import ResourceItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PodRequestedUsage:
    """Requested resources of a set of pods"""
    total: ResourceItem = field(default_factory=ResourceItem.empty)
    largest_memory: ResourceItem = field(default_factory=ResourceItem.empty)  # pending pod with most memory
    largest_cpu: ResourceItem = field(default_factory=ResourceItem.empty)  # pending pod with most CPU

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "total": self.total.to_dict(),
            "largest_memory": self.largest_memory.to_dict(),
            "largest_cpu": self.largest_cpu.to_dict(),
        }


@dataclass(frozen=True)
class NodeAvailableCapacity:
    """Allocatable capacity of a set of nodes"""
    total: ResourceItem = field(default_factory=ResourceItem.empty)
    # Allocatable pair of the node with the most free memory / CPU
    largest_available_memory: ResourceItem = field(default_factory=ResourceItem.empty)
    largest_available_cpu: ResourceItem = field(default_factory=ResourceItem.empty)

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            "total": self.total.to_dict(),
            "largest_available_memory": self.largest_available_memory.to_dict(),
            "largest_available_cpu": self.largest_available_cpu.to_dict(),
        }


def _node_name(node: client.V1Node) -> str:
    return node.metadata.name if node.metadata else ""


def _node_allocatable(node: client.V1Node) -> ResourceItem:
    allocatable = node.status.allocatable if node.status else None
    return ResourceItem.from_resource_list(allocatable)


def calculate_pods_requested_usage(pods: List[client.V1Pod]) -> PodRequestedUsage:
    """
    Calculate the total requested resources of all pods.

    Every pod counts towards the total. Only Pending pods are candidates for
    the largest CPU and largest memory requests, which are tracked
    independently and only replaced by a strictly larger request.
    """
    total = ResourceItem.empty()
    largest_memory = ResourceItem.empty()
    largest_cpu = ResourceItem.empty()
    
    for pod in pods:
        requests = compute_pod_resource_request(pod)
        total = total + requests
        
        if pod.status is not None and pod.status.phase == POD_PENDING:
            if requests.memory > largest_memory.memory:
                largest_memory = requests
            if requests.cpu > largest_cpu.cpu:
                largest_cpu = requests
    
    return PodRequestedUsage(
        total=total,
        largest_memory=largest_memory,
        largest_cpu=largest_cpu
    )


def get_node_available_resources(
    node: client.V1Node,
    grouped_pods: Mapping[str, List[client.V1Pod]]
) -> ResourceItem:
    """
    Calculate a node's allocatable resources minus the requests of the pods
    attributed to it that are still using node resources.

    The result is negative when the node is over-committed.
    """
    used = ResourceItem.empty()
    for pod in grouped_pods.get(_node_name(node), []):
        if is_pod_using_node_resources(pod):
            used = used + compute_pod_resource_request(pod)
    return _node_allocatable(node) - used


def calculate_nodes_capacity(
    nodes: List[client.V1Node],
    pods: List[client.V1Pod],
    attribution: AttributionSource = NOMINATED_NODE
) -> NodeAvailableCapacity:
    """
    Calculate the total allocatable capacity of all nodes, and find the nodes
    with the most available CPU and the most available memory.

    The largest available fields hold the winning node's allocatable pair. A
    node takes over when its available amount is strictly greater than the
    recorded value in that dimension, so ties keep the earlier node.
    """
    total = ResourceItem.empty()
    largest_available_memory = ResourceItem.empty()
    largest_available_cpu = ResourceItem.empty()
    
    grouped_pods = map_pods(pods, attribution)
    for node in nodes:
        allocatable = _node_allocatable(node)
        total = total + allocatable
        
        available = get_node_available_resources(node, grouped_pods)
        logger.debug(
            f"Node {_node_name(node)}: allocatable cpu={allocatable.cpu}m memory={allocatable.memory}, "
            f"available cpu={available.cpu}m memory={available.memory}"
        )
        if available.cpu > largest_available_cpu.cpu:
            largest_available_cpu = allocatable
        if available.memory > largest_available_memory.memory:
            largest_available_memory = allocatable
    
    return NodeAvailableCapacity(
        total=total,
        largest_available_memory=largest_available_memory,
        largest_available_cpu=largest_available_cpu
    )
