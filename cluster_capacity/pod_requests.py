"""
Pod Resource Requests
Effective CPU/memory request of a pod, computed the way the scheduler does
"""

from typing import List, Optional

from kubernetes import client

from cluster_capacity.resources import ResourceItem

RESTART_POLICY_ALWAYS = "Always"


def _container_requests(container: client.V1Container) -> ResourceItem:
    resources = container.resources
    if resources is None:
        return ResourceItem.empty()
    return ResourceItem.from_resource_list(resources.requests)


def _is_restartable_init_container(container: client.V1Container) -> bool:
    # Sidecar containers are init containers with restartPolicy Always
    return getattr(container, "restart_policy", None) == RESTART_POLICY_ALWAYS


def compute_pod_resource_request(pod: client.V1Pod) -> ResourceItem:
    """
    Compute the effective resource request of a pod.

    Regular containers run together, so their requests are summed. Init
    containers run one at a time before them; each one needs its own request
    plus that of every sidecar started earlier. Sidecars keep running next to
    the regular containers. The pod needs the larger of the two phases in each
    dimension, plus any pod overhead.

    Raises:
        ValueError: if a request quantity cannot be parsed
    """
    spec: Optional[client.V1PodSpec] = pod.spec
    if spec is None:
        return ResourceItem.empty()
    
    containers: List[client.V1Container] = spec.containers or []
    init_containers: List[client.V1Container] = spec.init_containers or []
    
    requests = ResourceItem.empty()
    for container in containers:
        requests = requests + _container_requests(container)
    
    sidecar_requests = ResourceItem.empty()
    init_requests = ResourceItem.empty()
    for container in init_containers:
        container_requests = _container_requests(container)
        if _is_restartable_init_container(container):
            requests = requests + container_requests
            sidecar_requests = sidecar_requests + container_requests
            container_requests = sidecar_requests
        else:
            container_requests = container_requests + sidecar_requests
        init_requests = init_requests.max(container_requests)
    
    requests = requests.max(init_requests)
    
    if spec.overhead:
        requests = requests + ResourceItem.from_resource_list(spec.overhead)
    
    return requests
