#!/usr/bin/env python3

"""
Instruction Set

Every instruction is a record of a matcher (mask and pattern), a debug
mnemonic, and a plain function which applies its effect to the Machine.  An
opcode belongs to an instruction when (opcode & mask) == pattern, so literal
opcodes such as CLS simply use a mask of 0xFFFF.

The DispatchTable groups instructions by mask and keys each group by pattern,
which keeps lookups to a handful of dictionary hits.  It refuses to build if
any two matchers could claim the same opcode, so a successful lookup is always
the one and only match.

Instructions advance the program counter themselves: by 2 normally, by 4 when
a skip is taken, or not at all when jumping or waiting for a key.

Decoded fields (always in the same opcode positions):
    x   = Register (0-15), second nibble
    y   = Register (0-15), third nibble
    n   = Nibble, fourth nibble
    kk  = Byte, lower 8 bits
    nnn = Address, lower 12 bits
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from collections import namedtuple
from .constants import FLAG_REGISTER, FONT_GLYPH_SIZE, FONT_LOCATION, SPRITE_WIDTH


class InstructionError(Exception):
    pass


class DispatchError(InstructionError):
    pass


class UnknownInstructionError(InstructionError):
    def __init__(self, opcode):
        self.opcode = opcode
        super().__init__("Opcode 0x{:04x} is not emulated".format(opcode))


Opcode = namedtuple("Opcode", "word x y n kk nnn")


def decode(word):
    return Opcode(word, (word & 0xF00) >> 8, (word & 0xF0) >> 4, word & 0xF, word & 0xFF, word & 0xFFF)


class Instruction(namedtuple("Instruction", "name mask pattern mnemonic execute")):
    __slots__ = ()

    def matches(self, word):
        return word & self.mask == self.pattern

    def overlaps(self, other):
        # Two matchers collide if their patterns agree on every bit both of them test
        return (self.pattern ^ other.pattern) & self.mask & other.mask == 0

    def describe(self, op):
        return self.mnemonic.format(**op._asdict())


class DispatchTable:
    def __init__(self, instructions):
        self.instructions = []
        self.masks = {}

        for instruction in instructions:
            if instruction.pattern & ~instruction.mask:
                raise DispatchError("{} pattern has bits outside its mask".format(instruction.name))

            for existing in self.instructions:
                if instruction.overlaps(existing):
                    raise DispatchError("{} overlaps {}".format(instruction.name, existing.name))

            self.instructions.append(instruction)
            self.masks.setdefault(instruction.mask, {})[instruction.pattern] = instruction

    def lookup(self, word):
        for mask, patterns in self.masks.items():
            instruction = patterns.get(word & mask)

            if instruction is not None:
                return instruction

        raise UnknownInstructionError(word)


def _next(machine):
    machine.registers.pc.add(2)


def _skip_if(machine, condition):
    machine.registers.pc.add(4 if condition else 2)


def _00E0(machine, op):  # CLS
    machine.framebuffer.clear()
    machine.framebuffer.schedule_redraw()
    _next(machine)


def _00EE(machine, op):  # RET
    # The call address was pushed, so step past the CALL itself
    pc = machine.registers.pc
    pc.write(machine.stack.pop())
    pc.add(2)


def _1nnn(machine, op):  # JP addr
    machine.registers.pc.write(op.nnn)


def _2nnn(machine, op):  # CALL addr
    pc = machine.registers.pc
    machine.stack.push(pc.read())
    pc.write(op.nnn)


def _3xkk(machine, op):  # SE Vx, byte
    _skip_if(machine, machine.registers.read(op.x) == op.kk)


def _4xkk(machine, op):  # SNE Vx, byte
    _skip_if(machine, machine.registers.read(op.x) != op.kk)


def _5xy0(machine, op):  # SE Vx, Vy
    regs = machine.registers
    _skip_if(machine, regs.read(op.x) == regs.read(op.y))


def _6xkk(machine, op):  # LD Vx, byte
    machine.registers.write(op.x, op.kk)
    _next(machine)


def _7xkk(machine, op):  # ADD Vx, byte
    # No carry flag for this one
    regs = machine.registers
    regs.write(op.x, (regs.read(op.x) + op.kk) & 0xFF)
    _next(machine)


def _8xy0(machine, op):  # LD Vx, Vy
    regs = machine.registers
    regs.write(op.x, regs.read(op.y))
    _next(machine)


def _8xy1(machine, op):  # OR Vx, Vy
    regs = machine.registers
    regs.write(op.x, regs.read(op.x) | regs.read(op.y))
    _next(machine)


def _8xy2(machine, op):  # AND Vx, Vy
    regs = machine.registers
    regs.write(op.x, regs.read(op.x) & regs.read(op.y))
    _next(machine)


def _8xy3(machine, op):  # XOR Vx, Vy
    regs = machine.registers
    regs.write(op.x, regs.read(op.x) ^ regs.read(op.y))
    _next(machine)


# For the remaining 8xy_ instructions, Vf is written AFTER Vx, so the flag survives when x is f


def _8xy4(machine, op):  # ADD Vx, Vy
    regs = machine.registers
    val = regs.read(op.x) + regs.read(op.y)
    regs.write(op.x, val & 0xFF)
    regs.write(FLAG_REGISTER, int(val > 0xFF))  # Vf is set when carrying
    _next(machine)


def _8xy5(machine, op):  # SUB Vx, Vy
    regs = machine.registers
    vx_val = regs.read(op.x)
    vy_val = regs.read(op.y)
    regs.write(op.x, (vx_val - vy_val) & 0xFF)
    regs.write(FLAG_REGISTER, int(vx_val >= vy_val))  # Vf is set when NOT borrowing
    _next(machine)


def _8xy6(machine, op):  # SHR Vx {, Vy}
    # Shifts Vy into Vx, as on the original interpreter
    regs = machine.registers
    val = regs.read(op.y)
    regs.write(op.x, val >> 1)
    regs.write(FLAG_REGISTER, val & 1)
    _next(machine)


def _8xy7(machine, op):  # SUBN Vx, Vy
    regs = machine.registers
    vx_val = regs.read(op.x)
    vy_val = regs.read(op.y)
    regs.write(op.x, (vy_val - vx_val) & 0xFF)
    regs.write(FLAG_REGISTER, int(vy_val >= vx_val))
    _next(machine)


def _8xyE(machine, op):  # SHL Vx {, Vy}
    regs = machine.registers
    val = regs.read(op.y)
    regs.write(op.x, (val << 1) & 0xFF)
    regs.write(FLAG_REGISTER, val >> 7)
    _next(machine)


def _9xy0(machine, op):  # SNE Vx, Vy
    regs = machine.registers
    _skip_if(machine, regs.read(op.x) != regs.read(op.y))


def _Annn(machine, op):  # LD I, addr
    machine.registers.i.write(op.nnn)
    _next(machine)


def _Bnnn(machine, op):  # JP V0, addr
    regs = machine.registers
    regs.pc.write(op.nnn + regs.read(0x0))


def _Cxkk(machine, op):  # RND Vx, byte
    # The ANDing here is intentional.  This is not a random number between 0 and 'byte' inclusive.
    machine.registers.write(op.x, machine.random_byte() & op.kk)
    _next(machine)


def _Dxyn(machine, op):  # DRW Vx, Vy, nibble
    regs = machine.registers
    ram = machine.ram
    framebuffer = machine.framebuffer
    vx_pos = regs.read(op.x)
    vy_pos = regs.read(op.y)
    i = regs.i.read()
    collided = False
    regs.write(FLAG_REGISTER, 0)

    for y in range(op.n):
        spr_data = ram.read(i + y)

        for x in range(SPRITE_WIDTH):
            if spr_data & (0x80 >> x):
                # Don't stop drawing on a collision.  Every set sprite pixel is still XORed
                if framebuffer.xor_pixel(vx_pos + x, vy_pos + y):
                    collided = True

    regs.write(FLAG_REGISTER, int(collided))
    framebuffer.schedule_redraw()
    _next(machine)


def _Ex9E(machine, op):  # SKP Vx
    regs = machine.registers
    _skip_if(machine, regs.is_key_down(regs.read(op.x)))


def _ExA1(machine, op):  # SKNP Vx
    regs = machine.registers
    _skip_if(machine, not regs.is_key_down(regs.read(op.x)))


def _Fx07(machine, op):  # LD Vx, DT
    machine.registers.write(op.x, machine.delay_timer.read())
    _next(machine)


def _Fx0A(machine, op):  # LD Vx, K
    # Leaving the program counter alone makes the scheduler run this again next tick, so timers and the display
    # keep going while we wait.
    regs = machine.registers
    key = regs.get_pressed_key()

    if key is None:
        machine.awaiting_key = op.x
        return

    regs.write(op.x, key)
    machine.awaiting_key = None
    _next(machine)


def _Fx15(machine, op):  # LD DT, Vx
    machine.delay_timer.set(machine.registers.read(op.x))
    _next(machine)


def _Fx18(machine, op):  # LD ST, Vx
    machine.sound_timer.set(machine.registers.read(op.x))
    _next(machine)


def _Fx1E(machine, op):  # ADD I, Vx
    # No wraparound.  Pointing I past the 12-bit address space halts emulation
    regs = machine.registers
    regs.i.add(regs.read(op.x))
    _next(machine)


def _Fx29(machine, op):  # LD F, Vx
    regs = machine.registers
    regs.i.write(FONT_LOCATION + regs.read(op.x) * FONT_GLYPH_SIZE)
    _next(machine)


def _Fx33(machine, op):  # LD B, Vx
    regs = machine.registers
    ram = machine.ram
    val = regs.read(op.x)
    i = regs.i.read()
    ram.write(i, val // 100)             # Most-significant digit
    ram.write(i + 1, (val // 10) % 10)   # Middle digit
    ram.write(i + 2, val % 10)           # Least-significant digit
    _next(machine)


def _Fx55(machine, op):  # LD [I], Vx
    regs = machine.registers

    for reg in range(op.x + 1):
        machine.ram.write(regs.i.read(), regs.read(reg))
        regs.i.add(1)

    _next(machine)


def _Fx65(machine, op):  # LD Vx, [I]
    regs = machine.registers

    for reg in range(op.x + 1):
        regs.write(reg, machine.ram.read(regs.i.read()))
        regs.i.add(1)

    _next(machine)


INSTRUCTION_SET = (
    Instruction("00E0", 0xFFFF, 0x00E0, "CLS", _00E0),
    Instruction("00EE", 0xFFFF, 0x00EE, "RET", _00EE),
    Instruction("1nnn", 0xF000, 0x1000, "JP 0x{nnn:03x}", _1nnn),
    Instruction("2nnn", 0xF000, 0x2000, "CALL 0x{nnn:03x}", _2nnn),
    Instruction("3xkk", 0xF000, 0x3000, "SE V{x:x}, 0x{kk:02x}", _3xkk),
    Instruction("4xkk", 0xF000, 0x4000, "SNE V{x:x}, 0x{kk:02x}", _4xkk),
    Instruction("5xy0", 0xF00F, 0x5000, "SE V{x:x}, V{y:x}", _5xy0),
    Instruction("6xkk", 0xF000, 0x6000, "LD V{x:x}, 0x{kk:02x}", _6xkk),
    Instruction("7xkk", 0xF000, 0x7000, "ADD V{x:x}, 0x{kk:02x}", _7xkk),
    Instruction("8xy0", 0xF00F, 0x8000, "LD V{x:x}, V{y:x}", _8xy0),
    Instruction("8xy1", 0xF00F, 0x8001, "OR V{x:x}, V{y:x}", _8xy1),
    Instruction("8xy2", 0xF00F, 0x8002, "AND V{x:x}, V{y:x}", _8xy2),
    Instruction("8xy3", 0xF00F, 0x8003, "XOR V{x:x}, V{y:x}", _8xy3),
    Instruction("8xy4", 0xF00F, 0x8004, "ADD V{x:x}, V{y:x}", _8xy4),
    Instruction("8xy5", 0xF00F, 0x8005, "SUB V{x:x}, V{y:x}", _8xy5),
    Instruction("8xy6", 0xF00F, 0x8006, "SHR V{x:x}, V{y:x}", _8xy6),
    Instruction("8xy7", 0xF00F, 0x8007, "SUBN V{x:x}, V{y:x}", _8xy7),
    Instruction("8xyE", 0xF00F, 0x800E, "SHL V{x:x}, V{y:x}", _8xyE),
    Instruction("9xy0", 0xF00F, 0x9000, "SNE V{x:x}, V{y:x}", _9xy0),
    Instruction("Annn", 0xF000, 0xA000, "LD I, 0x{nnn:03x}", _Annn),
    Instruction("Bnnn", 0xF000, 0xB000, "JP V0, 0x{nnn:03x}", _Bnnn),
    Instruction("Cxkk", 0xF000, 0xC000, "RND V{x:x}, 0x{kk:02x}", _Cxkk),
    Instruction("Dxyn", 0xF000, 0xD000, "DRW V{x:x}, V{y:x}, 0x{n:x}", _Dxyn),
    Instruction("Ex9E", 0xF0FF, 0xE09E, "SKP V{x:x}", _Ex9E),
    Instruction("ExA1", 0xF0FF, 0xE0A1, "SKNP V{x:x}", _ExA1),
    Instruction("Fx07", 0xF0FF, 0xF007, "LD V{x:x}, DT", _Fx07),
    Instruction("Fx0A", 0xF0FF, 0xF00A, "LD V{x:x}, K", _Fx0A),
    Instruction("Fx15", 0xF0FF, 0xF015, "LD DT, V{x:x}", _Fx15),
    Instruction("Fx18", 0xF0FF, 0xF018, "LD ST, V{x:x}", _Fx18),
    Instruction("Fx1E", 0xF0FF, 0xF01E, "ADD I, V{x:x}", _Fx1E),
    Instruction("Fx29", 0xF0FF, 0xF029, "LD F, V{x:x}", _Fx29),
    Instruction("Fx33", 0xF0FF, 0xF033, "LD B, V{x:x}", _Fx33),
    Instruction("Fx55", 0xF0FF, 0xF055, "LD [I], V{x:x}", _Fx55),
    Instruction("Fx65", 0xF0FF, 0xF065, "LD V{x:x}, [I]", _Fx65)
)
