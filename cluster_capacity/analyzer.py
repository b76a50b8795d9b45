"""
Capacity Analyzer
Produces the usage and capacity summaries consumed by a scaling policy
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from kubernetes import client

from cluster_capacity.attribution import get_attribution_source
from cluster_capacity.capacity import (
    NodeAvailableCapacity,
    PodRequestedUsage,
    calculate_nodes_capacity,
    calculate_pods_requested_usage,
)
from cluster_capacity.config_loader import CapacityConfig, ConfigLoader, get_config_loader
from cluster_capacity.logging_config import setup_structured_logging
from cluster_capacity.pod_utils import filter_pods

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CapacityReport:
    """Usage and capacity summaries for one reconciliation cycle"""
    usage: PodRequestedUsage
    capacity: NodeAvailableCapacity
    pod_count: int
    node_count: int
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "pod_count": self.pod_count,
            "node_count": self.node_count,
            "usage": self.usage.to_dict(),
            "capacity": self.capacity.to_dict(),
        }


class CapacityAnalyzer:
    """Apply configured pod filtering and attribution, then run both aggregators"""
    
    def __init__(self, config: Optional[CapacityConfig] = None):
        self.config = config or CapacityConfig()
        self.attribution = get_attribution_source(self.config.attribution_source)
    
    @classmethod
    def from_env(cls, loader: Optional[ConfigLoader] = None) -> "CapacityAnalyzer":
        """Load configuration from the environment, set up logging and build an analyzer"""
        config = (loader or get_config_loader()).get_config()
        setup_structured_logging(
            config.log_level,
            json_format=config.log_format in ("json", "structured")
        )
        logger.info(f"Capacity analyzer configured with {config.attribution_source} attribution")
        return cls(config)
    
    def analyze(self, nodes: List[client.V1Node], pods: List[client.V1Pod]) -> CapacityReport:
        """
        Summarize requested usage and available capacity for a cluster snapshot.

        Quantity parse errors propagate to the caller.
        """
        counted_pods = filter_pods(
            pods,
            exclude_daemonsets=self.config.exclude_daemonsets,
            exclude_static=self.config.exclude_static_pods
        )
        
        usage = calculate_pods_requested_usage(counted_pods)
        capacity = calculate_nodes_capacity(nodes, counted_pods, self.attribution)
        
        report = CapacityReport(
            usage=usage,
            capacity=capacity,
            pod_count=len(counted_pods),
            node_count=len(nodes)
        )
        
        logger.info(
            f"Capacity summary ({self.attribution.name} attribution): "
            f"{report.pod_count} pods requesting cpu={usage.total.cpu}m memory={usage.total.memory}, "
            f"{report.node_count} nodes allocatable cpu={capacity.total.cpu}m memory={capacity.total.memory}"
        )
        if capacity.total.cpu and usage.total.cpu > capacity.total.cpu:
            logger.warning(
                f"Requested CPU ({usage.total.cpu}m) exceeds allocatable CPU ({capacity.total.cpu}m)"
            )
        if capacity.total.memory and usage.total.memory > capacity.total.memory:
            logger.warning(
                f"Requested memory ({usage.total.memory}) exceeds allocatable memory ({capacity.total.memory})"
            )
        
        return report
