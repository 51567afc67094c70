from dataclasses import FrozenInstanceError  # noqa: F401

import pytest

from designlab.bidding import Auction, Bidder, main


def test_new_bidder_has_no_amount():
    bidder = Bidder("akhil")
    assert bidder.amount == 0
    assert bidder.name == "akhil"


def test_amount_can_be_set_and_read_back():
    bidder = Bidder("akhil")
    bidder.amount = 250
    assert bidder.amount == 250


def test_bidders_with_same_fields_compare_equal():
    assert Bidder("a", 5) == Bidder("a", 5)
    assert Bidder("a", 5) != Bidder("a", 6)


def test_auction_keeps_its_fields():
    auction = Auction("lamp", 10, 90)
    assert (auction.item, auction.min_amount, auction.max_amount) == ("lamp", 10, 90)


def test_main_prints_bidder_amount(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["Bidding System", "b1 amount:100"]


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])