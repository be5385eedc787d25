# xarm

Building blocks for an ARM64 emulator. The package has no dependencies beyond
the Python standard library.

## Modules

### `xarm.defs`

- `UInt128`: a frozen 128-bit unsigned value made of two 64-bit halves, `low`
  and `high`. Each half must fit in 64 bits, or `ValueError` is raised.
  `UInt128.from_int(n)` splits an integer below `2**128` into halves, and
  `int(value)` joins them again. The `+`, `-` and `*` operators call
  `add128`, `sub128` and `mul128`.
- `Arm64Registers`: the register file. It has `x` (a list of 31 values for
  x0-x30), `sp`, `pc` and `v` (a list of 32 `UInt128` vector registers). All
  start at zero. The wrong number of registers, or a value that does not fit
  in 64 unsigned bits, raises `ValueError`.
- `PStateFlags`: the condition flags `n`, `z`, `c` and `v`, all `False` by
  default.
- `read_x(regs, index)`: indexes 0-30 return x0-x30 and index 31 returns the
  stack pointer. Any other index raises `IndexError`.
- `add128(a, b)` and `sub128(a, b)`: addition with carry and subtraction with
  borrow across the two halves, wrapping modulo `2**128`.
- `mul128(a, b)`: multiplication from 64-bit partial products. The low
  product is kept to 64 bits and the cross products are folded in at a 32-bit
  offset, so the result is the true product only when both high halves are
  zero and the product fits in 64 bits.

### `xarm.instructions`

- `Arm64Instruction`: a string enumeration of mnemonics (`ADD`, `ADC`, `ADCS`,
  `ADDG`, `ADR`, `ADRP`, `AND`, `ANDS`, `ASR`, `ASRV`, `AT`, `AUTDA`,
  `AUTDZA`, `AUTDB`, `AUTDZB`, `B`, `SUB`). `str()` of a member is its value.
  The value of `AUTDB` is `"AUTDBA"`.

### `xarm.syscalls`

- `GPR_NAMES`: the names `"x0"` to `"x30"`.
- `gpr_name(index)`: the name of register 0-30. Any other index raises
  `IndexError`.
- `ArmLinuxSyscall`: Linux system call numbers on ARM64 (`READ` = 63,
  `WRITE` = 64).
- `X86LinuxSyscall`: Linux system call numbers on x86-64 (`READ`, `WRITE`,
  `OPEN`, `CLOSE`, `GETPID`, `FORK`, `EXECVE`, `EXIT`).
- `WindowsKernelSyscall`: Windows kernel service numbers 0-19, from
  `ACCESS_CHECK` to `ENUMERATE_VALUE_KEY`.

## Installation

```
pip install .
```

## Usage

```python
from xarm.defs import Arm64Registers, UInt128, add128, read_x
from xarm.instructions import Arm64Instruction
from xarm.syscalls import ArmLinuxSyscall, gpr_name

regs = Arm64Registers()
regs.x[8] = int(ArmLinuxSyscall.WRITE)
print(gpr_name(8), read_x(regs, 8))      # x8 64

total = add128(UInt128(low=2**64 - 1, high=0), UInt128(low=1, high=0))
print(total.low, total.high)             # 0 1
print(int(UInt128.from_int(5) + UInt128.from_int(7)))  # 12

print(str(Arm64Instruction.ADD))         # ADD
```

## What it does not do

There is no instruction decoder or executor, no memory model, no system call
handling and no command to run a program. The package holds the register
state, flags, 128-bit arithmetic, mnemonic names and syscall numbers only.

## Running the tests

```
pip install .[test]
pytest
```