import pytest

from dungeonlab.stack_driver import ScriptError, main, run_script


def test_header_is_echoed():
    assert run_script("Stack tests\n") == "\n#Stack tests\n"


def test_comment_lines_are_echoed():
    output = run_script("Header\n# a note here\n")
    assert output.endswith("# a note here\n")


def test_constructor_and_pushes():
    output = run_script("H\nc 2\n+ 1\n+ 2\np\n")
    lines = output.splitlines()
    assert "Stack(2) -- Successful" in lines
    assert "Push(1) -- successful" in lines
    assert "Push(2) -- successful" in lines
    assert "Print() -- Top { 2 1 } Bottom" in lines


def test_push_past_capacity_grows():
    output = run_script("H\nc 2\n+ 1\n+ 2\n+ 3\nz\ns\n")
    lines = output.splitlines()
    assert "Push(3) -- successful" in lines
    assert "Capacity() -- 4" in lines
    assert "Size() -- 3" in lines


def test_pop_on_empty_reports_failure():
    output = run_script("H\nc 3\n-\n")
    assert "Pop() -- Failed Empty Stack" in output.splitlines()


def test_pop_success():
    output = run_script("H\nc 3\n+ 5\n-\ne\n")
    lines = output.splitlines()
    assert "Pop() -- successful" in lines
    assert "IsEmpty() -- true" in lines


def test_top_on_empty_reports_failure():
    output = run_script("H\nc 3\nt\n")
    assert "Top() -- Top() -- Failed Empty Stack" in output.splitlines()


def test_top_max_min_values():
    output = run_script("H\nc 5\n+ 3\n+ 8\n+ 1\nt\n>\n<\n")
    lines = output.splitlines()
    assert "Top() -- 1" in lines
    assert "Max() -- 8" in lines
    assert "Min() -- 3" in lines


def test_peek_valid_and_invalid():
    output = run_script("H\nc 5\n+ 3\n+ 8\n? 1\n? 2\n? -1\n")
    lines = output.splitlines()
    assert "Peek(1) -- 3" in lines
    assert "Peek(2) -- Peek(2) -- Failed Invalid Peek" in lines
    assert "Peek(-1) -- Peek(-1) -- Failed Invalid Peek" in lines


def test_is_full_and_make_empty():
    output = run_script("H\nc 1\n+ 9\nf\nm\ne\n")
    lines = output.splitlines()
    assert "IsFull() -- true" in lines
    assert "MakeEmpty()" in lines
    assert "IsEmpty() -- true" in lines


def test_destructor_output():
    output = run_script("H\nc 1\nd\n")
    assert output.endswith("~Stack()\n\n")


def test_unknown_operation_raises():
    with pytest.raises(ScriptError) as info:
        run_script("H\nc 1\nq\n")
    assert "unrecognized operation 'q'" in str(info.value)
    assert "Stack(1) -- Successful" in info.value.output


def test_operation_without_stack_raises():
    with pytest.raises(ScriptError):
        run_script("H\n+ 4\n")


def test_negative_capacity_fails():
    with pytest.raises(ScriptError) as info:
        run_script("H\nc -1\n")
    assert str(info.value) == "Failed : Terminating now..."
    assert info.value.output.endswith("\nStack(-1)")


def test_missing_value_stops_after_operation():
    output = run_script("H\nc 2\n+ x\ns\n")
    lines = output.splitlines()
    assert "Push(0) -- successful" in lines
    assert not any(line.startswith("Size()") for line in lines)


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "Error - unable to open input file" in capsys.readouterr().out


def test_main_runs_file(tmp_path, capsys):
    script = tmp_path / "script.txt"
    script.write_text("Header\nc 2\n+ 6\nt\n", encoding="utf-8")
    assert main([str(script)]) == 0
    out = capsys.readouterr().out
    assert "Top() -- 6" in out.splitlines()


def test_main_reports_script_error(tmp_path, capsys):
    script = tmp_path / "bad.txt"
    script.write_text("Header\nc 2\nq\n", encoding="utf-8")
    assert main([str(script)]) == 1
    assert "Terminating now..." in capsys.readouterr().out