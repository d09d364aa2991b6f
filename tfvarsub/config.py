"""Run configuration assembled from command-line arguments."""

from argparse import Namespace
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass
class RunConfig:
    """Settings for one tfvarsub invocation."""
    root_dir: Path = Path('./')
    vars_ext: str = '.tfvars'
    template_ext: str = '.tf'
    exclude: List[str] = field(default_factory=list)
    export_file: Optional[Path] = None
    export: bool = True
    dry_run: bool = False
    backup: bool = False
    fail_on_unresolved: bool = False

    @classmethod
    def from_args(cls, args: Namespace) -> 'RunConfig':
        """Build a config from parsed arguments, keeping defaults for absent flags."""
        config = cls()
        config.root_dir = Path(getattr(args, 'root_dir', None) or config.root_dir)
        config.vars_ext = _normalize_ext(getattr(args, 'vars_ext', None) or config.vars_ext)
        config.template_ext = _normalize_ext(getattr(args, 'template_ext', None) or config.template_ext)
        config.exclude = list(getattr(args, 'exclude', None) or [])

        export_file = getattr(args, 'export_file', None)
        config.export_file = Path(export_file) if export_file else None
        config.export = not getattr(args, 'no_export', False)
        config.dry_run = getattr(args, 'dry_run', False)
        config.backup = getattr(args, 'backup', False)
        config.fail_on_unresolved = getattr(args, 'fail_on_unresolved', False)
        return config


def _normalize_ext(ext: str) -> str:
    return ext if ext.startswith('.') else f'.{ext}'
