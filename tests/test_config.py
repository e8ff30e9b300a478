import pytest

from lane_runner.config import GameConfig


def test_defaults_match_reference_behavior():
    config = GameConfig()
    assert config.lane_length == 50
    assert config.character_position == 5
    assert config.jump_duration == 3
    assert config.obstacle_frequency == 5
    assert config.spawn_probability == 0.5
    assert config.initial_tick_speed == 0.2
    assert config.min_tick_speed == 0.05
    assert config.tick_speed_step == 0.0005
    assert config.frame_height == 5


@pytest.mark.parametrize('kwargs', [
    {'lane_length': 0},
    {'character_position': 50},
    {'character_position': -1},
    {'jump_duration': 0},
    {'obstacle_frequency': 0},
    {'spawn_probability': 1.5},
    {'min_tick_speed': 0.0},
    {'min_tick_speed': 0.3},
    {'tick_speed_step': -0.001},
    {'obstacle_glyph': '##'},
    {'jump_key': ''},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        GameConfig(**kwargs)


def test_from_env_overrides_fields():
    config = GameConfig.from_env({
        'LANE_RUNNER_LANE_LENGTH': '60',
        'LANE_RUNNER_SPAWN_PROBABILITY': '0.25',
        'LANE_RUNNER_OBSTACLE_GLYPH': '%',
        'UNRELATED': 'x',
    })
    assert config.lane_length == 60
    assert config.spawn_probability == 0.25
    assert config.obstacle_glyph == '%'
    assert config.jump_duration == 3


def test_from_env_without_overrides_is_default():
    assert GameConfig.from_env({}) == GameConfig()


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv('LANE_RUNNER_JUMP_DURATION', '4')
    assert GameConfig.from_env().jump_duration == 4


def test_from_env_names_malformed_variable():
    with pytest.raises(ValueError, match='LANE_RUNNER_LANE_LENGTH'):
        GameConfig.from_env({'LANE_RUNNER_LANE_LENGTH': 'wide'})


def test_from_env_still_validates():
    with pytest.raises(ValueError):
        GameConfig.from_env({'LANE_RUNNER_CHARACTER_POSITION': '80'})


@pytest.mark.parametrize('name', [
    'initial_tick_speed', 'min_tick_speed', 'tick_speed_step', 'spawn_probability',
])
@pytest.mark.parametrize('raw', ['inf', 'nan'])
def test_from_env_rejects_non_finite_numbers(name, raw):
    with pytest.raises(ValueError, match=name):
        GameConfig.from_env({'LANE_RUNNER_' + name.upper(): raw})
