from salted_bf.bit_store import MembershipStore


def test_activate_and_query():
    store = MembershipStore(20)
    assert not store.is_active(3)
    store.activate(3)
    store.activate(19)
    assert store.is_active(3)
    assert store.is_active(19)
    assert not store.is_active(4)
    assert store.activated_count == 2


def test_activate_is_idempotent():
    store = MembershipStore(8)
    store.activate(5)
    store.activate(5)
    assert store.activated_count == 1
    assert store.bit_array == bytearray([1 << 5])


def test_bit_array_size_rounds_up():
    assert len(MembershipStore(1).bit_array) == 1
    assert len(MembershipStore(8).bit_array) == 1
    assert len(MembershipStore(9).bit_array) == 2
    assert len(MembershipStore(500).bit_array) == 63
