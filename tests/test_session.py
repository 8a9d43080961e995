import pytest

from termsweeper.session import GameSession, parse_turn


def scripted(*answers):
    it = iter(answers)

    def ask(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return ask


def run_session(engine, *answers):
    out = []
    result = GameSession(engine, ask=scripted(*answers), write=out.append).run()
    return result, out


@pytest.mark.parametrize("text,expected", [
    ('2,4', (1, 3)),
    ('2 4', (1, 3)),
    (' 1 ; 1 ', (0, 0)),
    ('3,5', (2, 4)),
    ('quit', 'quit'),
    ('QUIT', 'quit'),
    ('  Quit ', 'quit'),
    ('0,1', None),
    ('1,0', None),
    ('4,1', None),
    ('1,6', None),
    ('-1,2', None),
    ('2-4', (1, 3)),
    ('2', None),
    ('', None),
    ('hello', None),
    ('1.5,2', None),
    ('2,3.0', None),
    ('2.,4', None),
])
def test_parse_turn(text, expected):
    assert parse_turn(text, 3, 5) == expected


def test_win_transcript(corner_engine):
    result, out = run_session(corner_engine, '1,2', '1,3', '2,1', '2,2', '2,3', '3,1', '3,2')
    assert result == 'win'
    assert out[0] == '=== Minesweeper Game ==='
    assert out[-1] == 'You Win!'
    # title, first render, blank, hint, then one render per turn
    assert len(out) == 4 + 7 + 1


def test_lose_transcript(corner_engine):
    result, out = run_session(corner_engine, '1,1')
    assert result == 'loss'
    assert out[-1] == 'Game Over!'
    assert '1|  X  1  0' in out[-2]
    assert '3|  0  1  X' in out[-2]


def test_invalid_and_repeated_input_reprompts(corner_engine):
    result, out = run_session(corner_engine, '0,0', '1,2', '1,2', 'nope', 'quit')
    assert result == 'quit'
    assert out.count('[WARNING] Wrong input, try again') == 2
    assert out.count('[NOTE] This cell is already opened') == 1
    assert out[-1] == 'Buy!'
    assert corner_engine.opened_cells == {(0, 1)}
    assert not corner_engine.game_over


def test_end_of_input_quits(corner_engine):
    result, out = run_session(corner_engine)
    assert result == 'quit'
    assert out[-1] == 'Buy!'


def test_ctrl_c_quits(corner_engine):
    def ask(prompt):
        raise KeyboardInterrupt

    out = []
    assert GameSession(corner_engine, ask=ask, write=out.append).run() == 'quit'
    assert 'You Win!' not in out and 'Game Over!' not in out


def test_huge_numbers_are_wrong_input():
    assert parse_turn('1' * 5000 + ',1', 3, 3) is None
    assert parse_turn('1,' + '9' * 5000, 3, 3) is None
    assert parse_turn('1' * 10 + ',1', 3, 3) is None


def test_huge_numbers_do_not_end_the_session(corner_engine):
    result, out = run_session(corner_engine, '9' * 5000 + ',1', 'quit')
    assert result == 'quit'
    assert out.count('[WARNING] Wrong input, try again') == 1
    assert out[-1] == 'Buy!'
