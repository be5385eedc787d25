"""ARM64 register state, 128-bit arithmetic, mnemonics and syscall numbers."""

__version__ = "0.1.0"
__all__ = ["defs", "instructions", "syscalls"]