"""
Config materializer
-------------------
Writes Game.ini / Engine.ini from environment variables following the
mapping rules. Both files are loaded up front, mutated in memory and only
written back once every matched variable has been applied.
"""

from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional
from .document import IniDocument, build_multi_block
from .mapping import DEFAULT_RULES, GAME_INI, ENGINE_INI, MappingRule, is_multi_value, match_environment
from ..errors import ConfigWriteError, MissingConfigError
from ..planner import Plan, PlannedWrite
from ..settings import Settings
from ..logging_setup import get_logger

log = get_logger("vein.launcher.config")


class ConfigMaterializer:
    def __init__(self, config_path: Path, rules: Iterable[MappingRule] = DEFAULT_RULES):
        self.config_path = Path(config_path)
        self.rules = tuple(rules)

    @property
    def file_names(self) -> List[str]:
        names = [GAME_INI, ENGINE_INI]
        for rule in self.rules:
            if rule.file_name not in names:
                names.append(rule.file_name)
        return names

    def path_for(self, file_name: str) -> Path:
        return self.config_path / file_name

    def plan(self, environ: Mapping[str, str]) -> Plan:
        writes: List[PlannedWrite] = []
        notes: List[str] = []
        for rule in self.rules:
            matched = match_environment(rule, environ)
            if not matched:
                continue
            for var in matched:
                multi = is_multi_value(rule.section, var.key)
                writes.append(PlannedWrite(
                    file=rule.file_name,
                    section=rule.section,
                    key=var.key,
                    value=var.value,
                    env_var=var.name,
                    multi_value=multi,
                ))
                if multi and not build_multi_block(var.key, var.value):
                    notes.append(f"{var.name} is empty: all {var.key} entries in [{rule.section}] will be removed")
        return Plan(
            ok=True,
            writes=writes,
            notes=notes,
            paths={name: str(self.path_for(name)) for name in self.file_names},
        )

    # ------------------------------------------------------------------ #
    def _prepare_files(self) -> None:
        try:
            self.config_path.mkdir(parents=True, exist_ok=True)
            for name in self.file_names:
                self.path_for(name).touch(exist_ok=True)
        except OSError as e:
            raise ConfigWriteError(f"Cannot prepare config directory {self.config_path}: {e}") from e

    def _load(self) -> Dict[str, IniDocument]:
        docs: Dict[str, IniDocument] = {}
        for name in self.file_names:
            path = self.path_for(name)
            try:
                docs[name] = IniDocument.load(path)
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigWriteError(f"Cannot read {path}: {e}") from e
        return docs

    def _persist(self, docs: Dict[str, IniDocument]) -> None:
        # write every temp file first, then move them all into place
        staged: List[tuple] = []
        try:
            for name, doc in docs.items():
                path = self.path_for(name)
                temp_path = path.with_suffix(path.suffix + ".tmp")
                temp_path.write_text(doc.serialize(), encoding="utf-8")
                staged.append((temp_path, path))
            for temp_path, path in staged:
                temp_path.replace(path)
        except OSError as e:
            for temp_path, _ in staged:
                temp_path.unlink(missing_ok=True)
            raise ConfigWriteError(f"Failed to write INI files in {self.config_path}: {e}") from e

    def apply(self, environ: Mapping[str, str]) -> List[Path]:
        self._prepare_files()
        docs = self._load()

        for rule in self.rules:
            matched = match_environment(rule, environ)
            if not matched:
                continue
            doc = docs[rule.file_name]
            for var in matched:
                if "\n" in var.value:
                    log.warning("%s spans several lines, only the first one is written", var.name)
                if is_multi_value(rule.section, var.key):
                    log.info("Setting %s list in [%s] of %s", var.key, rule.section, rule.file_name)
                    doc.set_multi(rule.section, var.key, var.value)
                    continue
                log.debug("Setting %s in [%s] of %s", var.key, rule.section, rule.file_name)
                doc.set_value(rule.section, var.key, var.value)
                doc.normalize_key(rule.section, var.key)

        self._persist(docs)
        return [self.path_for(name) for name in self.file_names]


def materialize(settings: Settings, environ: Mapping[str, str],
                rules: Optional[Iterable[MappingRule]] = None) -> List[Path]:
    if settings.config_path is None:
        raise MissingConfigError("CONFIG_PATH is not set.")
    materializer = ConfigMaterializer(settings.config_path, rules if rules is not None else DEFAULT_RULES)
    paths = materializer.apply(environ)
    log.info("Materialized %s", ", ".join(str(p) for p in paths))
    return paths
