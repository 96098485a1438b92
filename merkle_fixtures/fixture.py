from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from merkle_fixtures.config import MEMBERS
from merkle_fixtures.encoding import encode_root_hex
from merkle_fixtures.leaves import member_leaves
from merkle_fixtures.logging_config import get_logger
from merkle_fixtures.tree import MerkleTree

logger = get_logger(__name__)


@dataclass
class FixtureRoot:
    val: int
    price: int
    members: Tuple[str, ...]
    leaves: List[bytes]     # in member order; the tree holds them sorted
    tree: MerkleTree

    @property
    def root(self) -> bytes:
        return self.tree.get_root()

    @property
    def encoded(self) -> str:
        return encode_root_hex(self.root)


def compute_leaves(val: int, price: int, members: Sequence[str] = MEMBERS) -> List[bytes]:
    return member_leaves(members, val, price)


def build_fixture(val: int, price: int, members: Sequence[str] = MEMBERS) -> FixtureRoot:
    leaves = compute_leaves(val, price, members)
    tree = MerkleTree(leaves, sort_leaves=True, sort_pairs=True)
    logger.info("fixture_root", val=val, price=price, root=tree.get_hex_root())
    return FixtureRoot(val=val, price=price, members=tuple(members), leaves=leaves, tree=tree)


def fixture_details(fixture: FixtureRoot) -> Dict[str, Any]:
    """
    Report for a fixture: root, encoded root and per-member leaf and proof.
    uint256 values are emitted as decimal strings for JSON safety.
    """
    root = fixture.root
    entries = []
    for i, (member, leaf) in enumerate(zip(fixture.members, fixture.leaves)):
        proof = fixture.tree.get_proof(fixture.tree.get_leaf_index(leaf))
        entries.append({
            "index": i,
            "address": member,
            "leaf": "0x" + leaf.hex(),
            "proof": ["0x" + p.hex() for p in proof],
            "valid": MerkleTree.verify_proof(leaf, proof, root),
        })
    return {
        "merkleRoot": fixture.tree.get_hex_root(),
        "encodedRoot": fixture.encoded,
        "val": str(fixture.val),
        "price": str(fixture.price),
        "memberCount": len(fixture.members),
        "members": entries,
    }
