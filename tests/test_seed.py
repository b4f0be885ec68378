from bookledger import BookStatus, Role, seed_demo_data


def test_seed_demo_data(ledger, clock):
    seed_demo_data(ledger)

    assert [u.username for u in ledger.list_users()] == ["alice", "bob", "ava"]
    inventory = {b.reference_number: status for b, status in ledger.report_inventory()}
    assert inventory == {
        1: BookStatus.ON_LOAN,
        2: BookStatus.ON_LOAN,
        3: BookStatus.ON_LOAN,
        4: BookStatus.AVAILABLE,
    }

    admin = ledger.login("ava", "admin-pass")
    assert admin.role is Role.ADMIN
    clock.advance(days=4)
    assert [b.reference_number for b in ledger.overdue_books(admin)] == [1, 2, 3]
