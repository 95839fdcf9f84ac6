"""Helpers partagés."""
import copy


def deep_merge(base: dict, override: dict) -> dict:
    """
    Merge récursif de override sur base — retourne un nouveau dict.

    Les dicts sont fusionnés clé par clé, override gagne sur tout le reste ;
    les listes sont remplacées, jamais concaténées. Ni base ni override ne
    sont modifiés.
    """
    out = copy.deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], val)
        else:
            out[key] = copy.deepcopy(val)
    return out
