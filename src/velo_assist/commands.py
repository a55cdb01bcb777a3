"""Interactive commands that generate Velo, state and test files."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from velo_assist.config import VeloConfig
from velo_assist.models import PropertyDescriptor
from velo_assist.path_utils import create_file_path, file_exists, get_relative_import_path
from velo_assist.templates import generate_state_class, generate_test_file, generate_velo_class
from velo_assist.validators import (
    validate_base_name,
    validate_state_name,
    validate_test_name,
    validate_velo_name,
)

logger = logging.getLogger(__name__)

ADD_ANOTHER_PROPERTY = "Add another property"
FINISH = "Finish"
NO_TARGET_DIRECTORY = "No target directory found"
INVALID_PROPERTY_FORMAT = 'Invalid format. Use "name:type" or "name:type:defaultValue"'

Validator = Callable[[str], str | None]


class Prompter(ABC):
    """The interactive host that asks the user questions and shows results."""

    @abstractmethod
    async def ask_text(
        self,
        prompt: str,
        placeholder: str = "",
        validate: Validator | None = None,
    ) -> str | None:
        """Ask for free-form text.

        Implementations re-prompt while validate returns a message.

        Returns:
            The accepted answer, or None if the user cancelled
        """
        pass

    @abstractmethod
    async def pick(self, options: list[str], placeholder: str = "") -> str | None:
        """Ask the user to choose one of options; None if cancelled."""
        pass

    @abstractmethod
    async def confirm_overwrite(self, message: str) -> bool:
        """Ask whether an existing file may be overwritten."""
        pass

    @abstractmethod
    async def show_error(self, message: str) -> None:
        pass

    async def open_document(self, path: Path) -> None:
        """Present a freshly written file to the user. Optional."""
        return None


def parse_property_spec(spec: str) -> PropertyDescriptor | None:
    """Parse a `name:type[:defaultValue]` token.

    Returns:
        PropertyDescriptor, or None if the token has fewer than two parts
    """
    parts = spec.split(":")
    if len(parts) < 2:
        return None

    default_value = parts[2].strip() if len(parts) > 2 else None
    return PropertyDescriptor(
        name=parts[0].strip(),
        type=parts[1].strip(),
        default_value=default_value or None,
    )


class VeloCommands:
    """The four file generation commands.

    Each command awaits its prompts one at a time. Cancelling a prompt or
    declining an overwrite ends the command without writing anything
    further.
    """

    def __init__(self, prompter: Prompter, config: VeloConfig | None = None):
        self.prompter = prompter
        self.config = config or VeloConfig()

    async def new_velo(self, target_dir: Path | None) -> Path | None:
        """Create a Velo class file.

        Returns:
            Path of the written file, or None if nothing was written
        """
        if not await self._check_target(target_dir):
            return None

        name = await self.prompter.ask_text(
            "Enter Velo class name",
            placeholder="CounterNotifier",
            validate=validate_velo_name,
        )
        if not name:
            return None

        file_path = self._file_path(target_dir, name)
        if not await self._may_write(file_path):
            return None

        self._write_file(file_path, generate_velo_class(name))
        await self.prompter.open_document(file_path)
        return file_path

    async def new_state(self, target_dir: Path | None) -> Path | None:
        """Create an Equatable state class file from prompted properties."""
        if not await self._check_target(target_dir):
            return None

        name = await self.prompter.ask_text(
            "Enter State class name",
            placeholder="CounterState",
            validate=validate_state_name,
        )
        if not name:
            return None

        properties = await self.ask_state_properties()
        file_path = self._file_path(target_dir, name)
        if not await self._may_write(file_path):
            return None

        self._write_file(file_path, generate_state_class(name, properties))
        await self.prompter.open_document(file_path)
        return file_path

    async def new_velo_with_state(self, target_dir: Path | None) -> tuple[Path, Path] | None:
        """Create `<Base>State` and `<Base>Notifier` files from a base name.

        The notifier imports the state file by relative path.

        Returns:
            (velo_path, state_path), or None if nothing was written
        """
        if not await self._check_target(target_dir):
            return None

        base_name = await self.prompter.ask_text(
            'Enter base name (e.g., "Counter" will create CounterNotifier and CounterState)',
            placeholder="Counter",
            validate=validate_base_name,
        )
        if not base_name:
            return None

        properties = await self.ask_state_properties()
        velo_name = f"{base_name}Notifier"
        state_name = f"{base_name}State"

        state_path = self._file_path(target_dir, state_name)
        self._write_file(state_path, generate_state_class(state_name, properties))

        velo_path = self._file_path(target_dir, velo_name)
        state_import = get_relative_import_path(velo_path, state_path)
        self._write_file(
            velo_path,
            generate_velo_class(velo_name, state_import=state_import, state_name=state_name),
        )

        await self.prompter.open_document(velo_path)
        return velo_path, state_path

    async def new_test(self, target_dir: Path | None) -> Path | None:
        """Create `<name>_test.dart` in the test directory."""
        if not await self._check_target(target_dir):
            return None

        test_name = await self.prompter.ask_text(
            "Enter test name (without _test suffix)",
            placeholder="counter_notifier",
            validate=validate_test_name,
        )
        if not test_name:
            return None

        test_dir = target_dir / self.config.test_directory
        test_dir.mkdir(parents=True, exist_ok=True)

        file_path = self._file_path(test_dir, f"{test_name}_test")
        self._write_file(file_path, generate_test_file(test_name))
        await self.prompter.open_document(file_path)
        return file_path

    async def ask_state_properties(self) -> list[PropertyDescriptor]:
        """Collect state properties until the user cancels or finishes."""
        properties = []

        while True:
            spec = await self.prompter.ask_text(
                'Enter property (format: "name:type:defaultValue" or "name:type"). Leave empty to finish.',
                placeholder="count:int:0",
            )
            if not spec:
                break

            prop = parse_property_spec(spec)
            if prop is None:
                await self.prompter.show_error(INVALID_PROPERTY_FORMAT)
                continue

            properties.append(prop)

            choice = await self.prompter.pick([ADD_ANOTHER_PROPERTY, FINISH], placeholder="Add more properties?")
            if choice != ADD_ANOTHER_PROPERTY:
                break

        return properties

    async def _check_target(self, target_dir: Path | None) -> bool:
        if target_dir is None:
            await self.prompter.show_error(NO_TARGET_DIRECTORY)
            return False
        return True

    async def _may_write(self, file_path: Path) -> bool:
        if not file_exists(file_path):
            return True
        return await self.prompter.confirm_overwrite(f"File {file_path.name} already exists. Overwrite?")

    def _file_path(self, directory: Path, name: str) -> Path:
        return create_file_path(directory, name, self.config.file_extension)

    def _write_file(self, file_path: Path, content: str) -> None:
        file_path.write_bytes(content.encode("utf-8"))
        logger.debug(f"Wrote {file_path}")
