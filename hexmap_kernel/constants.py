"""
Hex Map Kernel — Layout Constants (Default Values)

All magic numbers live here as module-level defaults.
Per-run overrides are injected through LayoutConfig.
"""

# --- Grid ---
# Circumradius of one hex, in pixels.
HEX_SIZE: float = 24.0

# --- Cluster Placement ---
# Minimum hex distance between hexes of two different clusters.
MIN_CLUSTER_GAP: int = 3

# Number of expanding rings scanned before the fallback origin is used.
MAX_SEARCH_RADIUS: int = 100

# --- Grouping ---
OTHER_DOMAIN: str = "Other"
CLUSTER_ID_PREFIX: str = "cluster:"
