# devil/templates/cmake.py

"""
CMake based templates for C and C++ projects.

Both languages share the same layout:

    <target>/
    ├── CMakeLists.txt
    └── src
        └── main.<ext>

and differ only in the source extension, language standard and the
hello-world program.
"""
import logging
from pathlib import Path

from devil.errors import IOFailure
from devil.templates.base import Language, TemplateProvider, TemplateSpec

logger = logging.getLogger(__name__)

C_MAIN = """#include <stdio.h>

int main() {
    printf("Hello, world!\\n");
    return 0;
}
"""

CPP_MAIN = """#include <iostream>

int main() {
    std::cout << "Hello, world!" << std::endl;
    return 0;
}
"""

CMAKE_TEMPLATE = """cmake_minimum_required(VERSION 3.10)
project({name} VERSION 0.1.0 LANGUAGES {cmake_language})

set({flags_var} "${{{flags_var}}} -Wall -Wextra -Wpedantic")
set({standard_var} {standard})
set({standard_var}_REQUIRED ON)

file(GLOB_RECURSE SOURCES "src/*.{extension}")

add_executable({name} ${{SOURCES}})
target_include_directories({name} PRIVATE src)
set_target_properties({name} PROPERTIES
    RUNTIME_OUTPUT_DIRECTORY "${{CMAKE_BINARY_DIR}}/bin"
    ARCHIVE_OUTPUT_DIRECTORY "${{CMAKE_BINARY_DIR}}/lib"
    LIBRARY_OUTPUT_DIRECTORY "${{CMAKE_BINARY_DIR}}/lib"
)
"""


class CMakeProvider(TemplateProvider):
    extension: str
    main_source: str
    cmake_language: str
    flags_var: str
    standard_var: str
    standard: int

    def render_manifest(self, name: str) -> str:
        return CMAKE_TEMPLATE.format(
            name=name,
            cmake_language=self.cmake_language,
            flags_var=self.flags_var,
            standard_var=self.standard_var,
            standard=self.standard,
            extension=self.extension,
        )

    def scaffold(self, spec: TemplateSpec) -> None:
        src_dir = spec.target_dir / "src"
        main_file = src_dir / f"main.{self.extension}"
        manifest = spec.target_dir / "CMakeLists.txt"
        try:
            src_dir.mkdir(parents=True, exist_ok=True)
            _write(main_file, self.main_source)
            _write(manifest, self.render_manifest(spec.name))
        except OSError as e:
            raise IOFailure(f"Failed to write {self.language.value} project files: {e}") from e


def _write(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")
    logger.debug(f"Wrote {path}")


class CProvider(CMakeProvider):
    language = Language.C
    extension = "c"
    main_source = C_MAIN
    cmake_language = "C"
    flags_var = "CMAKE_C_FLAGS"
    standard_var = "CMAKE_C_STANDARD"
    standard = 11


class CppProvider(CMakeProvider):
    language = Language.CPP
    extension = "cpp"
    main_source = CPP_MAIN
    cmake_language = "CXX"
    flags_var = "CMAKE_CXX_FLAGS"
    standard_var = "CMAKE_CXX_STANDARD"
    standard = 17
