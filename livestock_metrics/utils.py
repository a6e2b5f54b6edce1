# MIT License
from __future__ import annotations
import hashlib, json
from .params import ProjectParameters


def params_hash(params: ProjectParameters) -> str:
    """Compute a stable hash for a set of project parameters.

    Serialises the parameters to JSON (with sorted keys) and computes a
    SHA256 hash.  The dashboard uses it as the cache key for computed
    metrics.

    Parameters
    ----------
    params:
        ProjectParameters instance.

    Returns
    -------
    str
        Hexadecimal string representation of the hash.
    """
    params_json = params.model_dump(mode="json")
    # ensure deterministic key ordering
    payload = json.dumps(params_json, sort_keys=True).encode("utf-8")
    return hashlib.sha256(payload).hexdigest()


def kg_to_tonnes(kg: float) -> float:
    """Convert kilograms to metric tonnes."""
    return kg / 1000.0
