"""Health reporting and failsafe decisions of the avoidance companion process."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from dronenav.common import MavState

logger = logging.getLogger(__name__)

MAV_COMPONENT_ID_AVOIDANCE = 196


@dataclass(frozen=True)
class CompanionStatus:
    """Status message of the companion process for the flight controller."""

    stamp: float
    component: int
    state: MavState


class AvoidanceNode:
    """Tracks the companion state and decides when the vehicle must hover or abort.

    ``publish`` receives every :class:`CompanionStatus` that is sent out.
    """

    def __init__(self, publish: Callable[[CompanionStatus], None]) -> None:
        self._publish = publish
        self.cmdloop_dt = 0.1
        self.statusloop_dt = 0.2
        self.timeout_termination = 15.0
        self.timeout_critical = 0.5
        self.timeout_startup = 5.0
        self.position_received = True
        self.state = MavState.BOOT

    def set_system_status(self, state: MavState) -> None:
        """Set the state that is reported next."""
        self.state = MavState(state)

    def publish_system_status(self) -> CompanionStatus:
        """Send the current state and return the message sent."""
        status = CompanionStatus(
            stamp=time.time(),
            component=MAV_COMPONENT_ID_AVOIDANCE,
            state=self.state,
        )
        self._publish(status)
        return status

    def check_failsafe(
        self, since_last_cloud: float, since_start: float, hover: bool
    ) -> bool:
        """Update the state from the elapsed times in seconds.

        Returns whether the vehicle should hover.
        """
        if (
            since_last_cloud > self.timeout_termination
            and since_start > self.timeout_termination
        ):
            self.set_system_status(MavState.FLIGHT_TERMINATION)
            logger.warning("Planner abort: missing required data")
        elif (
            since_last_cloud > self.timeout_critical
            and since_start > self.timeout_startup
        ):
            if self.position_received:
                hover = True
                self.set_system_status(MavState.CRITICAL)
            else:
                logger.warning(
                    "Pointcloud timeout: no position received, no waypoint to output"
                )
        elif not hover:
            self.set_system_status(MavState.ACTIVE)
        return hover