"""Register names and system call numbers."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "GPR_NAMES",
    "ArmLinuxSyscall",
    "X86LinuxSyscall",
    "WindowsKernelSyscall",
    "gpr_name",
]

# x0-x7 pass the first eight arguments, x8 is the indirect result location,
# x9-x15 are scratch registers.
GPR_NAMES: tuple[str, ...] = tuple(f"x{n}" for n in range(31))


def gpr_name(index: int) -> str:
    """Return the name of general purpose register ``index`` (0-30)."""
    if not 0 <= index < len(GPR_NAMES):
        raise IndexError(f"Invalid register index: {index}")
    return GPR_NAMES[index]


class ArmLinuxSyscall(IntEnum):
    """Linux system call numbers on AArch64."""

    READ = 63
    WRITE = 64


class X86LinuxSyscall(IntEnum):
    """Linux system call numbers on x86-64."""

    READ = 0
    WRITE = 1
    OPEN = 2
    CLOSE = 3
    GETPID = 39
    FORK = 57
    EXECVE = 59
    EXIT = 60


class WindowsKernelSyscall(IntEnum):
    """Windows kernel system call numbers."""

    ACCESS_CHECK = 0
    WORKER_FACTORY_WORKER_READY = 1
    ACCEPT_CONNECT_PORT = 2
    MAP_USER_PHYSICAL_PAGES_SCATTER = 3
    WAIT_FOR_SINGLE_OBJECT = 4
    CALL_BACK_RETURN = 5
    READ_FILE = 6
    DEVICE_IO_CONTROL_FILE = 7
    WRITE_FILE = 8
    REMOVE_IO_COMPLETION = 9
    RELEASE_SEMAPHORE = 10
    REPLY_WAIT_RECEIVE_PORT = 11
    REPLY_PORT = 12
    SET_INFORMATION_THREAD = 13
    SET_EVENT = 14
    CLOSE = 15
    QUERY_OBJECT = 16
    QUERY_INFORMATION_FILE = 17
    OPEN_KEY = 18
    ENUMERATE_VALUE_KEY = 19