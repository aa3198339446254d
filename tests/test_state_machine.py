import pytest

from robodefense.state_machine import State, StateMachine


class Recorder(State):
    def __init__(self, name, log, transparent=False):
        self.name = name
        self.log = log
        self.transparent = transparent
        self.paused = False

    def handle_event(self, event):
        self.log.append((self.name, "event", event))

    def update(self, dt):
        self.log.append((self.name, "update", dt))

    def render(self, target):
        target.append(self.name)

    def on_enter(self):
        self.log.append((self.name, "enter"))

    def on_exit(self):
        self.log.append((self.name, "exit"))

    def on_pause(self):
        self.paused = True
        self.log.append((self.name, "pause"))

    def on_resume(self):
        self.paused = False
        self.log.append((self.name, "resume"))

    def is_paused(self):
        return self.paused

    def is_transparent(self):
        return self.transparent


def test_state_is_abstract():
    with pytest.raises(TypeError):
        State()


def test_push_is_deferred_until_update():
    log = []
    machine = StateMachine(game="game")
    menu = Recorder("menu", log)
    machine.push(menu)
    assert machine.current() is None
    machine.update(0.5)
    assert machine.current() is menu
    assert menu.game == "game"
    assert log == [("menu", "enter"), ("menu", "update", 0.5)]


def test_push_pauses_previous_and_pop_resumes():
    log = []
    machine = StateMachine()
    play = Recorder("play", log)
    pause = Recorder("pause", log, transparent=True)
    machine.push(play)
    machine.push(pause)
    machine.update(0.1)
    assert len(machine) == 2
    assert machine.previous() is play
    assert play.paused is True

    machine.pop()
    machine.update(0.1)
    assert machine.current() is play
    assert machine.last_popped is pause
    assert play.paused is False
    assert ("pause", "exit") in log


def test_change_replaces_top():
    log = []
    machine = StateMachine()
    splash = Recorder("splash", log)
    menu = Recorder("menu", log)
    machine.push(splash)
    machine.handle_event("x")
    machine.change(menu)
    machine.handle_event("y")
    assert machine.current() is menu
    assert len(machine) == 1
    assert machine.last_popped is splash
    assert log == [
        ("splash", "enter"),
        ("splash", "event", "x"),
        ("splash", "exit"),
        ("menu", "enter"),
        ("menu", "event", "y"),
    ]


def test_clear_removes_everything():
    log = []
    machine = StateMachine()
    machine.push(Recorder("a", log))
    machine.push(Recorder("b", log))
    machine.update(0.0)
    machine.clear()
    machine.update(0.0)
    assert machine.has_states is False
    assert machine.current() is None
    assert machine.previous() is None
    assert log[-2:] == [("b", "exit"), ("a", "exit")]


def test_render_includes_states_under_transparent_top():
    machine = StateMachine()
    machine.push(Recorder("play", []))
    machine.push(Recorder("pause", [], transparent=True))
    machine.update(0.0)
    drawn = []
    machine.render(drawn)
    assert drawn == ["play", "pause"]


def test_render_only_top_when_opaque():
    machine = StateMachine()
    machine.push(Recorder("menu", []))
    machine.push(Recorder("settings", []))
    machine.update(0.0)
    drawn = []
    machine.render(drawn)
    assert drawn == ["settings"]


def test_paused_state_is_not_updated():
    log = []
    machine = StateMachine()
    play = Recorder("play", log)
    machine.push(play)
    machine.update(0.0)
    machine.pause_current()
    assert machine.is_current_paused() is True
    log.clear()
    machine.update(1.0)
    assert log == []
    machine.resume_current()
    assert machine.is_current_paused() is False
    machine.update(1.0)
    assert log == [("play", "resume"), ("play", "update", 1.0)]


def test_empty_machine_queries():
    machine = StateMachine()
    machine.pop()
    machine.update(0.1)
    assert len(machine) == 0
    assert machine.is_current_paused() is False
    assert machine.last_popped is None