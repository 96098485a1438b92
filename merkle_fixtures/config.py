import os

# --- CONFIGURATION ---

MEMBERS = (
    "0xDDdDddDdDdddDDddDDddDDDDdDdDDdDDdDDDDDDd",
    "0x92Bb439374a091c7507bE100183d8D1Ed2c9dAD3",
    "0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF",
)

# keccak256(abi.encodePacked(member, val, price))
LEAF_TYPES = ("address", "uint256", "uint256")

UINT256_MAX = 2**256 - 1

LOG_LEVEL_ENV = "MERKLE_FIXTURES_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_default_log_level() -> str:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").strip().upper()
    return level if level in LOG_LEVELS else "WARNING"
