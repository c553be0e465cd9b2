"""Tests for history reconstruction (Classic tree path, Envy raw-text path)."""
from currentcost import decode
from currentcost.core.tree import parse_tree
from currentcost.parsing.history import classic_history, envy_history


def test_envy_history_ten_sensors(envy_history):
    msg = decode(envy_history)
    assert msg.has_history() is True
    assert msg.has_readings() is False
    history = msg.history()
    assert sorted(history) == list(range(10))
    for record in history.values():
        assert list(record) == ["hours"]
        assert len(record["hours"]) == 4


def test_envy_history_values(envy_history):
    history = decode(envy_history).history()
    assert history[0]["hours"] == {250: 7.608, 248: 7.163, 246: 6.541, 244: 3.27}
    assert history[9]["hours"] == {250: 0.0, 248: 0.0, 246: 0.0, 244: 0.0}


def test_envy_history_only_ages_present():
    text = (
        "<msg><src>CC128-v0.11</src><hist>"
        "<data><sensor>4</sensor><h250>1.0</h250><h248>2.0</h248><h246>3.0</h246></data>"
        "<data><sensor>5</sensor><h250>0.5</h250><h244>0.25</h244></data>"
        "<data><sensor>6</sensor><d01>9</d01></data>"
        "</hist></msg>"
    )
    history = decode(text).history()
    assert set(history[5]["hours"]) == {250, 244}
    assert history[5]["hours"][244] == 0.25
    assert "days" not in history[5]
    assert history[6] == {"days": {1: 9.0}}


def test_envy_history_mixed_spans_in_one_block():
    text = (
        "<msg><src>CC128-v0.11</src><hist><data><sensor>0</sensor>"
        "<m001>10.5</m001><m002>11</m002><y1>100</y1><d001>1.5</d001><h004>0.1</h004>"
        "</data></hist></msg>"
    )
    record = decode(text).history()[0]
    assert record == {
        "hours": {4: 0.1},
        "days": {1: 1.5},
        "months": {1: 10.5, 2: 11.0},
        "years": {1: 100.0},
    }


def test_envy_history_skips_block_without_sensor():
    text = (
        "<msg><src>CC128-v0.11</src><hist>"
        "<data><h250>1.0</h250></data><data><sensor>2</sensor><h250>2.0</h250></data>"
        "</hist></msg>"
    )
    assert decode(text).history() == {2: {"hours": {250: 2.0}}}


def test_envy_history_tolerates_whitespace_between_blocks():
    text = (
        "<msg><src>CC128-v0.11</src><hist>\n"
        "  <data><sensor>0</sensor><h002>1.0</h002></data>\n"
        "  <data><sensor>1</sensor><h002>2.0</h002></data>\n"
        "</hist></msg>"
    )
    assert decode(text).history() == {0: {"hours": {2: 1.0}}, 1: {"hours": {2: 2.0}}}


def test_envy_history_ignores_top_level_fields():
    # <dsb>, <dsw> and the top-level <sensor> must not leak into the first block.
    text = (
        "<msg><src>CC128-v0.11</src><dsb>00596</dsb><sensor>7</sensor><hist><dsw>00597</dsw>"
        "<data><sensor>0</sensor><d01>3.0</d01></data></hist></msg>"
    )
    assert decode(text).history() == {0: {"days": {1: 3.0}}}


def test_envy_history_without_data_blocks():
    assert envy_history("<msg><hist><dsw>1</dsw></hist></msg>") == {}


def test_envy_history_empty_span_is_absent():
    assert envy_history("<msg><hist><data><sensor>3</sensor></data></hist></msg>") == {3: {}}


def test_classic_history(classic_history):
    msg = decode(classic_history)
    assert msg.has_history() is True
    history = msg.history()
    assert list(history) == [0]
    record = history[0]
    assert sorted(record) == ["days", "hours", "months", "years"]
    assert record["hours"][2] == 1.3
    assert sorted(record["hours"]) == list(range(2, 27, 2))
    assert sorted(record["days"]) == list(range(1, 32))
    assert sorted(record["months"]) == list(range(1, 13))
    assert sorted(record["years"]) == [1, 2, 3, 4]


def test_classic_history_partial_groups():
    tree = parse_tree("<msg><hist><hrs><h02>001.3</h02><h04>x</h04></hrs><yrs><y1>0000007</y1></yrs></hist></msg>")
    assert classic_history(tree) == {0: {"hours": {2: 1.3}, "years": {1: 7.0}}}


def test_classic_history_without_hist():
    assert classic_history(parse_tree("<msg><src><name>CC02</name></src></msg>")) == {}


def test_history_is_idempotent(envy_history, classic_history):
    for text in (envy_history, classic_history):
        msg = decode(text)
        first = msg.history()
        assert msg.history() == first


def test_history_copy_does_not_change_message(envy_history):
    msg = decode(envy_history)
    msg.history()[0]["hours"][250] = -1.0
    assert msg.history()[0]["hours"][250] == 7.608
