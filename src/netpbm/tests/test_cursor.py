from netpbm.cursor import BufferCursor


def test_tokens_split_on_every_whitespace_byte():
    cursor = BufferCursor(b"P5 12\t3\r\n")

    tokens = []
    while not cursor.exhausted:
        tokens.append(cursor.next_token())

    # '\r\n' is two delimiters, so an empty token sits between them
    assert tokens == [b"P5", b"12", b"3", b""], f"Unexpected tokens: {tokens}"


def test_adjacent_delimiters_yield_empty_tokens():
    cursor = BufferCursor(b"10  20")

    assert cursor.next_token() == b"10"
    assert cursor.next_token() == b""
    assert cursor.next_token() == b"20"
    assert cursor.exhausted


def test_last_token_without_delimiter_runs_to_end():
    cursor = BufferCursor(b"255")

    assert cursor.next_token() == b"255"
    assert cursor.position == 3
    assert cursor.delimiter is None
    assert cursor.exhausted


def test_positions_only_move_forward():
    buffer = b"P2 4 4\n# x\n15\n"
    cursor = BufferCursor(buffer)

    last_position = 0
    while not cursor.exhausted:
        cursor.next_token()
        assert cursor.previous_position <= cursor.position <= len(buffer), (
            f"Cursor invariant broken: {cursor.previous_position} / {cursor.position}"
        )
        assert cursor.position >= last_position, "Cursor moved backwards"
        last_position = cursor.position


def test_take_remainder_returns_untouched_bytes():
    cursor = BufferCursor(b"P5 2 2 255\n \n#\t")

    for _ in range(4):
        cursor.next_token()

    remainder = cursor.take_remainder()

    assert bytes(remainder) == b" \n#\t", f"Unexpected remainder: {bytes(remainder)!r}"
    assert cursor.exhausted
    assert cursor.previous_position == 11


def test_take_remainder_when_exhausted_is_empty():
    cursor = BufferCursor(b"255")
    cursor.next_token()

    assert bytes(cursor.take_remainder()) == b""


def test_skip_line_consumes_rest_of_comment():
    cursor = BufferCursor(b"# a comment with words\nP2")

    assert cursor.next_token() == b"#"
    cursor.skip_line()

    assert cursor.next_token() == b"P2"


def test_skip_line_is_a_no_op_after_newline_delimiter():
    cursor = BufferCursor(b"#comment\nP2\n")

    assert cursor.next_token() == b"#comment"
    cursor.skip_line()

    assert cursor.next_token() == b"P2"


def test_skip_line_without_newline_reaches_end():
    cursor = BufferCursor(b"# trailing comment")

    cursor.next_token()
    cursor.skip_line()

    assert cursor.exhausted


def test_accepts_any_bytes_like_buffer():
    for buffer in (bytearray(b"P2 1"), memoryview(b"P2 1")):
        cursor = BufferCursor(buffer)

        assert cursor.next_token() == b"P2"
        assert cursor.next_token() == b"1"
        assert len(cursor) == 4


def test_error_message_names_token_position():
    cursor = BufferCursor(b"P2 abc")
    cursor.next_token()
    cursor.next_token()

    assert cursor.format_error_message("bad width") == "Error while parsing: bad width, Position: 3"
