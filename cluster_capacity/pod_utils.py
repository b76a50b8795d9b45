"""
Pod Classification
Predicates deciding which pods occupy node resources
"""

import logging
from typing import Iterable, List

from kubernetes import client

logger = logging.getLogger(__name__)

POD_PENDING = "Pending"
POD_RUNNING = "Running"
POD_SCHEDULED = "PodScheduled"
CONDITION_TRUE = "True"

CONFIG_SOURCE_ANNOTATION = "kubernetes.io/config.source"


def pod_is_daemonset(pod: client.V1Pod) -> bool:
    """Return True if the pod is owned by a DaemonSet"""
    owner_references = (pod.metadata and pod.metadata.owner_references) or []
    return any(ref.kind == "DaemonSet" for ref in owner_references)


def pod_is_static(pod: client.V1Pod) -> bool:
    """Return True if the pod was created from a manifest file on the node"""
    annotations = (pod.metadata and pod.metadata.annotations) or {}
    return annotations.get(CONFIG_SOURCE_ANNOTATION) == "file"


def is_pod_scheduled(pod: client.V1Pod) -> bool:
    """Return True if the pod's PodScheduled condition is True"""
    conditions = (pod.status and pod.status.conditions) or []
    for condition in conditions:
        if condition.type == POD_SCHEDULED:
            return condition.status == CONDITION_TRUE
    return False


def is_pod_using_node_resources(pod: client.V1Pod) -> bool:
    """
    Return True if the pod currently consumes its node's allocatable budget.

    Only scheduled pods in the Pending or Running phase count. Completed,
    failed and unknown pods are excluded even when scheduled.
    """
    phase = pod.status.phase if pod.status else None
    return is_pod_scheduled(pod) and phase in (POD_PENDING, POD_RUNNING)


def filter_pods(
    pods: Iterable[client.V1Pod],
    exclude_daemonsets: bool = False,
    exclude_static: bool = False
) -> List[client.V1Pod]:
    """Drop DaemonSet and/or static pods, keeping input order"""
    filtered = []
    skipped = 0
    for pod in pods:
        if exclude_daemonsets and pod_is_daemonset(pod):
            skipped += 1
            continue
        if exclude_static and pod_is_static(pod):
            skipped += 1
            continue
        filtered.append(pod)
    
    if skipped:
        logger.debug(f"Filtered out {skipped} daemonset/static pods, {len(filtered)} remaining")
    return filtered
