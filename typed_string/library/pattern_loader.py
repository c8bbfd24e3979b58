# Path: typed_string/library/pattern_loader.py
"""
Pattern Loader

Loads named pattern definitions from YAML files in a library directory,
validates them against the PatternDefinition schema and compiles them
into matchers on demand.
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..core.logger import get_input_logger
from ..decoders.registry import DecoderRegistry, UnknownDecoderError
from ..matcher import TypedStringMatcher, from_template
from ..process.models.errors import TypedStringError
from .pattern_definition import PatternDefinition, PatternFile


DEFAULT_LIBRARY_PATH = Path(__file__).resolve().parent.parent / 'patterns'


class PatternLoader:
    """
    Loads pattern definitions from YAML files.

    Scans the library directory recursively for *.yaml / *.yml files.
    Files that fail to parse or validate are logged and skipped. When two
    files define the same name the later one wins, with a warning.

    Example:
        loader = PatternLoader(Path('patterns'))
        patterns = loader.load_all()

        route = loader.compile('route')
        route('route/42/end')  # (42,)
    """

    def __init__(
        self,
        library_path: Optional[Path] = None,
        registry: Optional[DecoderRegistry] = None
    ):
        """
        Initialize pattern loader.

        Args:
            library_path: Directory of YAML files. Defaults to the
                patterns/ directory shipped with the package.
            registry: Decoder registry for placeholder names
        """
        self.logger = get_input_logger('pattern_loader')
        self.library_path = Path(library_path) if library_path else DEFAULT_LIBRARY_PATH
        self.registry = registry

        self._patterns_cache: Optional[dict[str, PatternDefinition]] = None
        self._matchers: dict[str, TypedStringMatcher] = {}

    def load_all(self, use_cache: bool = True) -> dict[str, PatternDefinition]:
        """
        Load all pattern definitions from the library.

        Args:
            use_cache: Whether to use cached results

        Returns:
            Dictionary mapping pattern name to PatternDefinition
        """
        if use_cache and self._patterns_cache is not None:
            return self._patterns_cache

        patterns: dict[str, PatternDefinition] = {}
        self._matchers.clear()

        if not self.library_path.exists():
            self.logger.warning(f"Pattern library not found: {self.library_path}")
            self._patterns_cache = patterns
            return patterns

        yaml_files = sorted(self.library_path.rglob('*.yaml'))
        yaml_files.extend(sorted(self.library_path.rglob('*.yml')))

        self.logger.info(f"Found {len(yaml_files)} pattern library files")

        for yaml_file in yaml_files:
            for definition in self.load_file(yaml_file):
                if definition.name in patterns:
                    self.logger.warning(
                        f"Duplicate pattern name: {definition.name} in {yaml_file}"
                    )
                patterns[definition.name] = definition

        self.logger.info(f"Loaded {len(patterns)} pattern definitions")
        self._patterns_cache = patterns
        return patterns

    def load_file(self, file_path: Path) -> list[PatternDefinition]:
        """
        Load pattern definitions from one YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Definitions in file order (empty if the file is invalid)
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Failed to read pattern file {file_path}: {e}")
            return []

        if data is None:
            return []

        # A file may hold a single definition instead of a list
        if isinstance(data, dict) and 'patterns' not in data:
            data = {'patterns': [data]}

        try:
            parsed = PatternFile.model_validate(data)
        except ValidationError as e:
            self.logger.error(f"Invalid pattern file {file_path}: {e}")
            return []

        return parsed.patterns

    def get(self, name: str) -> Optional[PatternDefinition]:
        """Get a pattern definition by name."""
        return self.load_all().get(name)

    def names(self) -> list[str]:
        """Sorted pattern names."""
        return sorted(self.load_all())

    def compile(self, name: str) -> TypedStringMatcher:
        """
        Compile a named pattern into a matcher (cached).

        Raises:
            KeyError: If no pattern has that name
            TypedStringError: If the template is invalid
            UnknownDecoderError: If the template names an unknown decoder
        """
        if name in self._matchers:
            return self._matchers[name]

        definition = self.get(name)
        if definition is None:
            raise KeyError(f"Unknown pattern: {name}")

        matcher = from_template(
            definition.template,
            registry=self.registry,
            output_mode=definition.output,
            name=definition.name,
        )
        self._matchers[name] = matcher
        return matcher

    def compile_all(self) -> dict[str, TypedStringMatcher]:
        """
        Compile every pattern, skipping (and logging) invalid ones.

        Returns:
            Dictionary mapping pattern name to matcher
        """
        compiled = {}
        for name in self.names():
            try:
                compiled[name] = self.compile(name)
            except (TypedStringError, UnknownDecoderError) as e:
                self.logger.error(f"Pattern '{name}' does not compile: {e}")
        return compiled

    def verify_examples(self, name: str) -> list[str]:
        """
        Check a pattern's examples.

        Returns:
            Example inputs that do not match (empty when all match)
        """
        definition = self.get(name)
        if definition is None:
            raise KeyError(f"Unknown pattern: {name}")

        matcher = self.compile(name)
        failing = [ex for ex in definition.examples if not matcher.is_match(ex)]
        if failing:
            self.logger.warning(
                f"Pattern '{name}': {len(failing)} of "
                f"{len(definition.examples)} examples do not match"
            )
        return failing


__all__ = ['PatternLoader', 'DEFAULT_LIBRARY_PATH']
