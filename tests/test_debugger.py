from brainfuck_debugger import BrainfuckDebugger


def test_debug_run_traces_every_step(capsys):
    dbg = BrainfuckDebugger("+++[-]")
    assert dbg.debug_run() == ""
    out = capsys.readouterr().out
    assert "INITIAL" in out
    assert "Loop start: cell = 3, enter loop" in out
    assert "Loop end: cell = 0, exit loop" in out
    assert f"AFTER STEP {dbg.steps}" in out
    assert "FINAL RESULT" in out


def test_debug_run_reports_output(capsys):
    assert BrainfuckDebugger("+++.").debug_run() == "\x03"
    assert "[3]" in capsys.readouterr().out


def test_debug_run_stops_at_max_steps(capsys):
    dbg = BrainfuckDebugger("+[]", max_steps=5)
    dbg.debug_run()
    assert dbg.steps == 5
    assert not dbg.finished
    assert "stopped after 5 steps" in capsys.readouterr().out


def test_memory_line_marks_cursor(capsys):
    dbg = BrainfuckDebugger(">++", show_memory_range=1)
    dbg.run()
    dbg.show_state("END")
    out = capsys.readouterr().out
    assert "Memory:   [  0|  2|  0]" in out
    assert "Address:     0   1   2" in out
