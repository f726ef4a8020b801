from datetime import datetime, timezone

from ndau_client.models import AccountListReq, AccountListResp, AccountResp, CurrentPriceResp


def test_account_list_resp_reads_node_keys():
    raw = (
        b'{"NumAccounts": 120, "FirstIndex": 10, "After": "ndaa",'
        b' "NextAfter": "ndaz", "Accounts": ["ndab", "ndaz"], "Extra": 1}'
    )

    listing = AccountListResp.model_validate_json(raw)

    assert listing.num_accounts == 120
    assert listing.first_index == 10
    assert listing.accounts == ["ndab", "ndaz"]
    assert listing.next_after == "ndaz"


def test_account_resp_is_keyed_by_address():
    raw = (
        b'{"ndaone": {"id": "ndaone", "balance": 42,'
        b' "CurrencySeatDate": "2022-03-01T12:00:00Z"},'
        b' "ndatwo": {"balance": 7, "CurrencySeatDate": null}}'
    )

    accounts = AccountResp.model_validate_json(raw)

    assert len(accounts) == 2
    assert accounts["ndaone"].balance == 42
    assert accounts["ndaone"].currency_seat_date == datetime(2022, 3, 1, 12, tzinfo=timezone.utc)
    assert accounts["ndatwo"].currency_seat_date is None


def test_current_price_defaults_missing_fields():
    price = CurrentPriceResp.model_validate_json(b'{"marketPrice": 16, "sib": 3}')

    assert price.market_price == 16
    assert price.total_burned == 0
    assert price.model_dump(by_alias=True)["marketPrice"] == 16


def test_account_list_req_skips_unset_values():
    assert AccountListReq().to_params() == {}
    assert AccountListReq(limit=5, after="ndaa").to_params() == {"limit": 5, "after": "ndaa"}
