from validkit.validations import sequences, strings


def test_sequence_presence():
    assert sequences.is_present([1])
    assert sequences.is_present("x")
    assert not sequences.is_present([])
    assert not sequences.is_present(())


def test_sequence_uniqueness():
    assert sequences.is_unique(["a", "b", "c"])
    assert sequences.is_unique([])
    assert not sequences.is_unique([1, 2, 1])


def test_sequence_uniqueness_with_key():
    pairs = [(1, 2), (3, 4), (5, 6)]
    assert sequences.is_unique(pairs, key=lambda p: p[0])
    assert not sequences.is_unique([(1, 2), (1, 4)], key=lambda p: p[0])
    assert not sequences.is_unique(["Ab", "aB"], key=str.lower)


def test_string_presence():
    assert strings.is_present("x")
    assert not strings.is_present("")
    assert strings.is_blank("")
    assert not strings.is_blank(" ")


def test_html5_email():
    assert strings.is_valid_email("alice@example.com")
    assert strings.is_valid_email("o'brien+tag@mail-server.example.org")
    assert strings.is_valid_email("user@localhost")
    for bad in ["", "alice", "alice@", "@example.com", "a b@example.com", "alice@-example.com", "alice@example.com\n"]:
        assert not strings.is_valid_email(bad), bad
