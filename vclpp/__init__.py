"""VCL preprocessor toolchain.

Provides CLI around `libvclpp` which expands `#include`, `#define` and `#macro` directives.
"""
