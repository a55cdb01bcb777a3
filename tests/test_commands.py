"""Tests for the file generation commands."""

import pytest

from velo_assist.commands import (
    ADD_ANOTHER_PROPERTY,
    FINISH,
    INVALID_PROPERTY_FORMAT,
    NO_TARGET_DIRECTORY,
    Prompter,
    VeloCommands,
    parse_property_spec,
)
from velo_assist.config import VeloConfig
from velo_assist.models import PropertyDescriptor


class ScriptedPrompter(Prompter):
    """Answers prompts from prepared lists and records what was asked."""

    def __init__(self, texts=None, picks=None, overwrite=False):
        self.texts = list(texts or [])
        self.picks = list(picks or [])
        self.overwrite = overwrite
        self.asked = []
        self.validators = []
        self.pick_calls = []
        self.confirmations = []
        self.errors = []
        self.opened = []

    async def ask_text(self, prompt, placeholder="", validate=None):
        self.asked.append(prompt)
        self.validators.append(validate)
        return self.texts.pop(0) if self.texts else None

    async def pick(self, options, placeholder=""):
        self.pick_calls.append((options, placeholder))
        return self.picks.pop(0) if self.picks else None

    async def confirm_overwrite(self, message):
        self.confirmations.append(message)
        return self.overwrite

    async def show_error(self, message):
        self.errors.append(message)

    async def open_document(self, path):
        self.opened.append(path)


class TestParsePropertySpec:
    """Tests for parse_property_spec."""

    def test_name_and_type(self):
        assert parse_property_spec("data:String") == PropertyDescriptor(name="data", type="String")

    def test_with_default(self):
        assert parse_property_spec(" count : int : 0 ") == PropertyDescriptor("count", "int", "0")

    def test_too_few_parts(self):
        assert parse_property_spec("count") is None


class TestNewVelo:
    """Tests for VeloCommands.new_velo."""

    @pytest.mark.asyncio
    async def test_creates_file(self, tmp_path):
        prompter = ScriptedPrompter(texts=["CounterNotifier"])

        path = await VeloCommands(prompter).new_velo(tmp_path)

        assert path == tmp_path / "counter_notifier.dart"
        content = path.read_text(encoding="utf-8")
        assert "class CounterNotifier extends Velo<CounterState>" in content
        assert prompter.asked == ["Enter Velo class name"]
        assert prompter.opened == [path]

    @pytest.mark.asyncio
    async def test_uses_velo_name_validator(self, tmp_path):
        prompter = ScriptedPrompter(texts=["CounterNotifier"])

        await VeloCommands(prompter).new_velo(tmp_path)

        validate = prompter.validators[0]
        assert validate("counterNotifier")
        assert validate("CounterNotifier") is None
        assert validate("")

    @pytest.mark.asyncio
    async def test_cancelled_prompt_writes_nothing(self, tmp_path):
        prompter = ScriptedPrompter(texts=[])

        assert await VeloCommands(prompter).new_velo(tmp_path) is None
        assert list(tmp_path.iterdir()) == []

    @pytest.mark.asyncio
    async def test_missing_target_directory(self):
        prompter = ScriptedPrompter(texts=["CounterNotifier"])

        assert await VeloCommands(prompter).new_velo(None) is None
        assert prompter.errors == [NO_TARGET_DIRECTORY]
        assert prompter.asked == []

    @pytest.mark.asyncio
    async def test_confirms_overwrite(self, tmp_path):
        existing = tmp_path / "counter_notifier.dart"
        existing.write_text("old")
        prompter = ScriptedPrompter(texts=["CounterNotifier"], overwrite=True)

        path = await VeloCommands(prompter).new_velo(tmp_path)

        assert path == existing
        assert prompter.confirmations == ["File counter_notifier.dart already exists. Overwrite?"]
        assert "extends Velo<CounterState>" in existing.read_text()

    @pytest.mark.asyncio
    async def test_declined_overwrite_keeps_file(self, tmp_path):
        existing = tmp_path / "counter_notifier.dart"
        existing.write_text("old")
        prompter = ScriptedPrompter(texts=["CounterNotifier"], overwrite=False)

        assert await VeloCommands(prompter).new_velo(tmp_path) is None
        assert existing.read_text() == "old"
        assert prompter.opened == []


class TestNewState:
    """Tests for VeloCommands.new_state."""

    @pytest.mark.asyncio
    async def test_creates_file_without_properties(self, tmp_path):
        prompter = ScriptedPrompter(texts=["CounterState", None])

        path = await VeloCommands(prompter).new_state(tmp_path)

        assert path == tmp_path / "counter_state.dart"
        assert "const CounterState({});" in path.read_text()

    @pytest.mark.asyncio
    async def test_collects_properties(self, tmp_path):
        prompter = ScriptedPrompter(
            texts=["CounterState", "count:int:0", "isLoading:bool:false"],
            picks=[ADD_ANOTHER_PROPERTY, FINISH],
        )

        path = await VeloCommands(prompter).new_state(tmp_path)

        content = path.read_text()
        assert "this.count = 0" in content
        assert "this.isLoading = false" in content
        assert "List<Object?> get props => [count, isLoading];" in content
        assert len(prompter.pick_calls) == 2
        assert prompter.pick_calls[0] == ([ADD_ANOTHER_PROPERTY, FINISH], "Add more properties?")

    @pytest.mark.asyncio
    async def test_invalid_property_reprompts(self, tmp_path):
        prompter = ScriptedPrompter(
            texts=["CounterState", "count", "count:int"],
            picks=[FINISH],
        )

        path = await VeloCommands(prompter).new_state(tmp_path)

        assert prompter.errors == [INVALID_PROPERTY_FORMAT]
        assert "required this.count" in path.read_text()

    @pytest.mark.asyncio
    async def test_uses_state_name_validator(self, tmp_path):
        prompter = ScriptedPrompter(texts=["CounterState"])

        await VeloCommands(prompter).new_state(tmp_path)

        validate = prompter.validators[0]
        assert validate("Counter")
        assert validate("CounterState") is None


class TestNewVeloWithState:
    """Tests for VeloCommands.new_velo_with_state."""

    @pytest.mark.asyncio
    async def test_creates_both_files(self, tmp_path):
        prompter = ScriptedPrompter(texts=["Counter", "count:int:0"], picks=[FINISH])

        velo_path, state_path = await VeloCommands(prompter).new_velo_with_state(tmp_path)

        assert velo_path == tmp_path / "counter_notifier.dart"
        assert state_path == tmp_path / "counter_state.dart"
        velo_content = velo_path.read_text()
        assert "import 'counter_state.dart';" in velo_content
        assert "class CounterNotifier extends Velo<CounterState>" in velo_content
        assert "final int count;" in state_path.read_text()
        assert prompter.opened == [velo_path]

    @pytest.mark.asyncio
    async def test_uses_base_name_validator(self, tmp_path):
        prompter = ScriptedPrompter(texts=[])

        assert await VeloCommands(prompter).new_velo_with_state(tmp_path) is None

        validate = prompter.validators[0]
        assert validate("counter")
        assert validate("Counter") is None


class TestNewTest:
    """Tests for VeloCommands.new_test."""

    @pytest.mark.asyncio
    async def test_creates_test_file_in_test_directory(self, tmp_path):
        prompter = ScriptedPrompter(texts=["counter_velo"])

        path = await VeloCommands(prompter).new_test(tmp_path)

        assert path == tmp_path / "test" / "counter_velo_test.dart"
        assert "group('CounterVelo', () {" in path.read_text()

    @pytest.mark.asyncio
    async def test_configured_test_directory(self, tmp_path):
        prompter = ScriptedPrompter(texts=["counter_velo"])
        config = VeloConfig(test_directory="spec")

        path = await VeloCommands(prompter, config).new_test(tmp_path)

        assert path.parent == tmp_path / "spec"

    @pytest.mark.asyncio
    async def test_uses_test_name_validator(self, tmp_path):
        prompter = ScriptedPrompter(texts=[])

        await VeloCommands(prompter).new_test(tmp_path)

        validate = prompter.validators[0]
        assert validate("CounterVelo")
        assert validate("counter_velo") is None
        assert validate("123invalid")
