from merkle_fixtures.encoding import encode_root, encode_root_hex
from merkle_fixtures.fixture import FixtureRoot, build_fixture, compute_leaves, fixture_details
from merkle_fixtures.tree import MerkleTree

__version__ = "0.1.0"

__all__ = [
    "FixtureRoot",
    "MerkleTree",
    "build_fixture",
    "compute_leaves",
    "encode_root",
    "encode_root_hex",
    "fixture_details",
]
