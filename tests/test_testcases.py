import logging

import pytest

from sharequorum import Share
from sharequorum.errors import TestCaseFormatError
from sharequorum.field import MERSENNE_127
from sharequorum.testcases import (
    TestCase,
    load_test_case,
    parse_test_case,
    run_test_cases,
    solve_test_case,
)

SAMPLE = {
    "keys": {"n": 4, "k": 3},
    "1": {"base": "10", "value": "4"},
    "2": {"base": "2", "value": "111"},
    "3": {"base": "10", "value": "12"},
    "6": {"base": "4", "value": "213"},
}


def test_load_sample_case(write_case):
    case = load_test_case(write_case("sample", SAMPLE))
    assert case.name == "sample"
    assert (case.n, case.k) == (4, 3)
    assert case.shares == [Share(1, 4), Share(2, 7), Share(3, 12), Share(6, 39)]
    assert solve_test_case(case, MERSENNE_127) == 3


def test_corrupted_share_in_file(write_case):
    document = dict(SAMPLE, keys={"n": 5, "k": 3})
    document["7"] = {"value": "sum(50, 50)"}  # f(7) = 52
    results = run_test_cases([write_case("noisy", document)], MERSENNE_127)
    assert [(r.name, r.secret) for r in results] == [("noisy", 3)]


def test_shares_sorted_and_bad_entries_omitted():
    case = load_test_case(
        {
            "keys": {"n": 3, "k": 2},
            "9": {"base": "16", "value": "a"},
            "2": {"value": "lcm(2, 3)"},
            "5": {"base": "2", "value": "777"},
        }
    )
    assert case.shares == [Share(2, 6), Share(9, 10)]
    assert case.n == 3


def test_yaml_documents_are_accepted(write_case):
    path = write_case(
        "yaml_case",
        "keys: {n: 2, k: 1}\n1: {base: '10', value: '7'}\n2: {value: '7'}\n",
    )
    case = load_test_case(path)
    assert case.shares == [Share(1, 7), Share(2, 7)]
    assert solve_test_case(case, 17) == 7


@pytest.mark.parametrize(
    "document",
    [[1, 2], {"1": {"value": "3"}}, {"keys": {"n": 1}}, {"keys": {"k": "three"}}, {"keys": {"k": True}}],
)
def test_parse_rejects_malformed_documents(document):
    with pytest.raises(TestCaseFormatError):
        parse_test_case(document)


def test_skipped_cases_do_not_stop_the_run(write_case, caplog):
    too_few = {"keys": {"n": 3, "k": 3}, "1": {"value": "4"}, "2": {"base": "2", "value": "9"}}
    same_x = {"keys": {"n": 2, "k": 2}, "1": {"value": "4"}, "01": {"value": "5"}}
    paths = [
        write_case("too_few", too_few),
        write_case("broken", "keys: value: other"),
        write_case("same_x", same_x),
        str(write_case("missing", SAMPLE)) + ".gone",
        write_case("sample", SAMPLE),
    ]
    with caplog.at_level(logging.WARNING):
        results = run_test_cases(paths, MERSENNE_127)
    assert [(r.name, r.secret) for r in results] == [("sample", 3)]
    messages = [record.getMessage() for record in caplog.records]
    assert any("skipping too_few" in m for m in messages)
    assert any("skipping same_x" in m for m in messages)
    assert any("cannot load" in m for m in messages)


def test_solve_returns_none_when_skipped():
    case = TestCase(name="tiny", k=2, n=1, shares=[Share(1, 1)])
    assert solve_test_case(case, 17) is None


def test_repeated_shares_count_once():
    # f(x) = 5 + 3x mod 17; the share at x=3 is corrupted and listed twice
    case = load_test_case(
        {
            "keys": {"n": 4, "k": 2},
            "1": {"value": "8"},
            "2": {"value": "11"},
            "3": {"value": "0"},
            "03": {"value": "0"},
        }
    )
    assert case.shares == [Share(1, 8), Share(2, 11), Share(3, 0)]
    assert solve_test_case(case, 17) == 5


def test_non_integer_n_falls_back_to_decoded_count(caplog):
    with caplog.at_level(logging.WARNING, logger="sharequorum.testcases"):
        case = parse_test_case({"keys": {"n": "four", "k": 1}, "1": {"value": "3"}, "2": {"value": "3"}})
    assert case.n == 2
    assert case.k == 1
    assert any("keys.n" in record.getMessage() for record in caplog.records)
