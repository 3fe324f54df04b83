"""
Unit tests for the temporary field pool.
"""
import pytest
import taichi as ti

from pyimgproc.pool import FieldPool


@pytest.mark.unit
def test_pool_reuses_released_fields():
    p = FieldPool()
    a = p.get_field(ti.u32, (8,))
    a.release()
    b = p.get_field(ti.u32, 8)
    assert b is a
    assert p.stats() == (1, 1)


@pytest.mark.unit
def test_pool_hands_out_distinct_fields_when_busy():
    p = FieldPool()
    a = p.get_field(ti.u32, (8,))
    b = p.get_field(ti.u32, (8,))
    assert a is not b
    assert a.field.shape == (8,)
    assert p.stats() == (2, 2)


@pytest.mark.unit
def test_pool_keys_on_dtype_and_shape():
    p = FieldPool()
    a = p.get_field(ti.u32, (4,))
    a.release()
    assert p.get_field(ti.u32, (5,)) is not a
    assert p.get_field(ti.i32, (4,)) is not a


@pytest.mark.unit
def test_pool_context_manager_releases():
    p = FieldPool()
    with p.get_field(ti.u32, (3,)) as tpf:
        assert tpf.in_use
    assert not tpf.in_use


@pytest.mark.unit
def test_pool_double_release_raises():
    p = FieldPool()
    a = p.get_field(ti.u32, (2,))
    a.release()
    with pytest.raises(ValueError):
        a.release()


@pytest.mark.unit
def test_pool_release_all_and_clear():
    p = FieldPool()
    p.get_field(ti.u32, (2,))
    p.get_field(ti.u32, (2,))
    p.release_all()
    assert p.stats() == (2, 0)
    p.clear()
    assert p.stats() == (0, 0)
