"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and serves the bits as a
`RandomSource`.
"""

from __future__ import annotations

import logging
from typing import List

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import DEFAULT_QUANTUM_CONFIG, QuantumSourceConfig
from .mixing import amplify_entropy, bits_to_int, xor_bits

logger = logging.getLogger(__name__)

# Raw bits gathered per stream before mixing; matches one SHA-256 digest.
RAW_BITS_PER_REFILL = 256


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        # Kept for callers that want to inspect the last run.
        self.last_measurement_basis: list[str] | None = None
        self.last_circuit: QuantumCircuit | None = None

        if self.config.num_qubits < 1:
            raise ValueError("num_qubits must be at least 1.")

        # Ensure requested num_qubits does not exceed backend capability.
        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> tuple[QuantumCircuit, list[str]]:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        measurement_basis: list[str] = []

        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        # Odd qubits get a second H, i.e. are read in the X basis.
        for i in range(n):
            if i % 2 == 1:
                measurement_basis.append("X")
                qc.h(i)
            else:
                measurement_basis.append("Z")
            qc.measure(i, i)

        return qc, measurement_basis

    def sample_bits(self, count: int) -> List[int]:
        """
        Run the circuit as many shots as needed and return exactly
        `count` raw measurement bits.
        """
        n = self.config.num_qubits
        shots = max(1, -(-count // n))

        qc, measurement_basis = self._build_circuit()
        tqc = transpile(qc, self.backend)
        result = self.backend.run(tqc, shots=shots, memory=True).result()

        bits: List[int] = []
        for bitstring in result.get_memory():
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in bitstring[::-1])

        self.last_measurement_basis = measurement_basis
        self.last_circuit = qc
        return bits[:count]


class QuantumRandomSource:
    """
    `RandomSource` fed by simulated qubit measurements.

    Each refill XOR-combines `quantum_streams` independent runs of
    RAW_BITS_PER_REFILL bits and mixes them with `entropy_rounds` of
    SHA-256. `randbelow(n)` reads (n - 1).bit_length() bits per attempt and
    discards values >= n, so results are exactly uniform.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = QuantumEngine(self.config)
        self._buffer: List[int] = []
        self.refills = 0

    def _refill(self) -> None:
        combined: List[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self.engine.sample_bits(RAW_BITS_PER_REFILL)
            combined = bits if combined is None else xor_bits(combined, bits)

        assert combined is not None
        self._buffer.extend(amplify_entropy(combined, self.config.entropy_rounds))
        self.refills += 1
        logger.debug("quantum source refilled (%d bits buffered)", len(self._buffer))

    def _take_bits(self, count: int) -> List[int]:
        while len(self._buffer) < count:
            self._refill()
        taken, self._buffer = self._buffer[:count], self._buffer[count:]
        return taken

    def randbelow(self, n: int) -> int:
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        if n == 1:
            return 0
        width = (n - 1).bit_length()
        while True:
            value = bits_to_int(self._take_bits(width))
            if value < n:
                return value
