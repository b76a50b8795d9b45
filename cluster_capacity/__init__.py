"""
Cluster Capacity
Requested-usage and allocatable-capacity summaries for autoscaler decision loops
"""

__version__ = "0.1.0"

from cluster_capacity.resources import ResourceItem
from cluster_capacity.pod_utils import (
    pod_is_daemonset,
    pod_is_static,
    is_pod_scheduled,
    is_pod_using_node_resources,
    filter_pods,
)
from cluster_capacity.pod_requests import compute_pod_resource_request
from cluster_capacity.attribution import (
    NOMINATED_NODE,
    BOUND_NODE,
    map_pods,
)
from cluster_capacity.capacity import (
    PodRequestedUsage,
    NodeAvailableCapacity,
    calculate_pods_requested_usage,
    calculate_nodes_capacity,
    get_node_available_resources,
)

__all__ = [
    "ResourceItem",
    "pod_is_daemonset",
    "pod_is_static",
    "is_pod_scheduled",
    "is_pod_using_node_resources",
    "filter_pods",
    "compute_pod_resource_request",
    "NOMINATED_NODE",
    "BOUND_NODE",
    "map_pods",
    "PodRequestedUsage",
    "NodeAvailableCapacity",
    "calculate_pods_requested_usage",
    "calculate_nodes_capacity",
    "get_node_available_resources",
]
