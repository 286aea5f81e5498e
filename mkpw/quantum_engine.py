from __future__ import annotations

"""
Quantum randomness: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and serves the outcomes as a
RandomSource.
"""
from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import QuantumSourceConfig, DEFAULT_QUANTUM_CONFIG
from .entropy import DIGEST_BITS, BitPool, amplify_entropy
from .logger import CTX, get_logger
from .random_source import RandomSource

log = get_logger(CTX.RANDOM_SOURCE)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSourceConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        # Local simulator backend.
        self.backend = AerSimulator()

        if self.config.num_qubits <= 0:
            raise ValueError("num_qubits must be positive.")

        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSourceConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits in superposition, then measure even qubits in the
        Z basis and odd qubits in the X basis.
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                # X basis: rotate back before measuring
                qc.h(i)
            qc.measure(i, i)

        return qc

    def sample_bits(self, shots: int = 1) -> list[int]:
        """
        Run the circuit `shots` times and return the outcomes back to back,
        one bit per qubit per shot.
        """
        if shots <= 0:
            raise ValueError("shots must be positive.")

        tqc = transpile(self._build_circuit(), self.backend)
        memory = self.backend.run(tqc, shots=shots, memory=True).result().get_memory()

        bits: list[int] = []
        for bitstring in memory:
            # Qiskit orders bits as [q_(n-1) ... q_0]; reverse so index 0 is first qubit.
            bits.extend(int(b) for b in bitstring[::-1])
        return bits


class QuantumRandomSource(RandomSource):
    """
    RandomSource fed by QuantumEngine measurements.

    Every refill XOR-combines `quantum_streams` measured streams and mixes
    the result with `entropy_rounds` rounds of SHA-256. When mixing, each
    stream covers a full digest so that the pool never serves more bits
    than were measured. `engine` can be any object with a
    sample_bits(shots) method.
    """

    def __init__(self, config: QuantumSourceConfig | None = None, engine=None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.engine = engine if engine is not None else QuantumEngine(self.config)
        self._pool = BitPool(self._refill)

    def _measure_stream(self) -> list[int]:
        bits = list(self.engine.sample_bits(1))
        if not bits:
            raise RuntimeError("Quantum engine returned no bits")

        if self.config.entropy_rounds > 0 and len(bits) < DIGEST_BITS:
            # Measure enough further shots to fill a whole digest.
            shots = -(-(DIGEST_BITS - len(bits)) // len(bits))
            bits.extend(self.engine.sample_bits(shots))
        return bits

    def _refill(self) -> list[int]:
        combined: list[int] | None = None

        for _ in range(max(1, self.config.quantum_streams)):
            bits = self._measure_stream()
            if combined is None:
                combined = bits
            else:
                if len(bits) != len(combined):
                    raise ValueError(
                        "Quantum streams produced different bit-lengths; "
                        "this should not happen."
                    )
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        log.debug("Refilled entropy pool with %d measured bits", len(combined))

        # Hashing cannot add entropy: hand out at most as many bits as measured.
        return amplify_entropy(combined, self.config.entropy_rounds)[: len(combined)]

    def randrange(self, start: int, stop: int) -> int:
        if stop <= start:
            raise ValueError(f"empty range for randrange({start}, {stop})")
        return start + self._pool.below(stop - start)
