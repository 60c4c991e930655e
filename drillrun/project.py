"""Build the rust-project.json description used by rust-analyzer."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One exercise file seen as a crate."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])

    def to_dict(self) -> dict:
        return {
            "root_module": self.root_module,
            "edition": self.edition,
            "deps": list(self.deps),
            "cfg": list(self.cfg),
        }


@dataclass
class RustAnalyzerProject:
    """The contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def get_sysroot_src(self) -> str:
        """Find the standard library sources, from RUST_SRC_PATH or rustc's sysroot."""
        env_path = os.environ.get("RUST_SRC_PATH")
        if env_path is not None:
            self.sysroot_src = env_path
            return self.sysroot_src
        completed = subprocess.run(["rustc", "--print", "sysroot"], capture_output=True)
        text = completed.stdout.decode("utf-8", errors="replace")
        parts = text.split()
        toolchain = parts[0] if parts else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library")
        return self.sysroot_src

    def exercises_to_json(self, directory="./exercises") -> None:
        """Add a crate for every .rs file below ``directory``."""
        for path in sorted(Path(directory).glob("**/*")):
            if path.suffix == ".rs":
                self.crates.append(Crate(root_module=str(path)))

    def to_json(self) -> str:
        return json.dumps(
            {"sysroot_src": self.sysroot_src, "crates": [c.to_dict() for c in self.crates]},
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def write_to_disk(self, path="./rust-project.json") -> None:
        Path(path).write_text(self.to_json(), encoding="utf-8")