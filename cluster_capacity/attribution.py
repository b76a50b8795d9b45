"""
Pod Attribution
Decides which node a pod is counted against and groups pods by node
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from kubernetes import client

# Pods without an attributed node end up under this key, which never
# matches a real node name.
UNASSIGNED = ""


class AttributionSource:
    """Maps a pod to the name of the node it is counted against"""
    name = "base"

    def node_name(self, pod: client.V1Pod) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class NominatedNodeAttribution(AttributionSource):
    """
    Attribute pods to status.nominatedNodeName.

    The nominated node is a provisional hint set by the scheduler (for example
    during preemption) and is not a confirmed binding, so this is an
    approximation.
    """
    name = "nominated"

    def node_name(self, pod: client.V1Pod) -> str:
        if pod.status is None:
            return UNASSIGNED
        return pod.status.nominated_node_name or UNASSIGNED


class BoundNodeAttribution(AttributionSource):
    """Attribute pods to spec.nodeName, the node they are bound to"""
    name = "bound"

    def node_name(self, pod: client.V1Pod) -> str:
        if pod.spec is None:
            return UNASSIGNED
        return pod.spec.node_name or UNASSIGNED


NOMINATED_NODE = NominatedNodeAttribution()
BOUND_NODE = BoundNodeAttribution()

ATTRIBUTION_SOURCES: Dict[str, AttributionSource] = {
    NOMINATED_NODE.name: NOMINATED_NODE,
    BOUND_NODE.name: BOUND_NODE,
}


def get_attribution_source(name: str) -> AttributionSource:
    """Look up an attribution source by name"""
    try:
        return ATTRIBUTION_SOURCES[name]
    except KeyError:
        raise ValueError(
            f"Unknown attribution source: {name}. "
            f"Must be one of {', '.join(sorted(ATTRIBUTION_SOURCES))}"
        ) from None


def map_pods(
    pods: Iterable[client.V1Pod],
    attribution: AttributionSource = NOMINATED_NODE
) -> Dict[str, List[client.V1Pod]]:
    """Group pods by attributed node name, preserving input order within each group"""
    grouped: Dict[str, List[client.V1Pod]] = defaultdict(list)
    for pod in pods:
        grouped[attribution.node_name(pod)].append(pod)
    return dict(grouped)
