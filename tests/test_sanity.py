from __future__ import annotations


def test_sanity_import() -> None:
    import nbody_physics as nbp
    import numpy as np

    assert isinstance(nbp.__version__, str)
    assert np.add(1.0, 2.0) == 3.0
