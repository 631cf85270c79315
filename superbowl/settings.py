"""Screen dimensions and the player's persistent progress."""

from __future__ import annotations

from dataclasses import dataclass

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
UPGRADE_COST = 30


@dataclass
class Progress:
    """Points earned by the player and the strength bought with them."""

    points: int = 0
    strength: int = 0

    def upgrade(self) -> bool:
        """Spend points on one level of ball strength; return whether it happened."""
        if self.points < UPGRADE_COST:
            return False
        self.points -= UPGRADE_COST
        self.strength += 1
        return True

    def missing_points(self) -> int:
        """Points still needed for the next upgrade."""
        return UPGRADE_COST - self.points