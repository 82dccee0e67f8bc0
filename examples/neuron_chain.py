#!/usr/bin/env python3
"""
Example: Sensory -> Motor Neuron Chain

Drives a sensory neuron with a constant stimulus, forwards its output to a
motor neuron through an axonal connection, prunes the edge once the run is
over and saves both neurons to a checkpoint.
"""

import argparse
import asyncio
import logging

from neurite import (
    AsyncioSignalDelay,
    Neuron,
    NeuronCheckpoint,
    NeuronType,
    NeurotransmitterType,
    RecordingSignalDelay,
)


async def run_chain(sensory: Neuron, motor: Neuron, cycles: int, stimulus: float):
    motor_spikes = 0
    for cycle in range(cycles):
        await sensory.transmit(stimulus)
        relayed = sensory.detect()
        await motor.transmit(relayed, source=sensory)
        output = motor.detect()
        if output != 0.0:
            motor_spikes += 1
            print(f"cycle {cycle:4d}: motor fired {output:+.3f}")
    return motor_spikes


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--cycles", type=int, default=500)
    parser.add_argument("--stimulus", type=float, default=20.0)
    parser.add_argument("--real-time", action="store_true", help="wait out propagation delays")
    parser.add_argument("--checkpoint", default=None, help="path to save the final state")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    delay = AsyncioSignalDelay() if args.real_time else RecordingSignalDelay()
    sensory = Neuron(0, 0, 0, 1, 1, 1, NeuronType.SENSORY, NeurotransmitterType.EXCITATORY,
                     signal_delay=delay)
    motor = Neuron(1, 2, 3, 2, 3, 4, NeuronType.MOTOR, NeurotransmitterType.EXCITATORY,
                   signal_delay=delay)
    sensory.establish_axonal_connection(motor)

    print(f"Running {args.cycles} cycles with stimulus {args.stimulus}")
    spikes = asyncio.run(run_chain(sensory, motor, args.cycles, args.stimulus))

    print("\n" + "=" * 50)
    print(f"Motor spikes: {spikes}")
    for neuron in (sensory, motor):
        print(neuron)

    sensory.prune_axonal_connection(motor)
    print(f"Edge kept after pruning: {motor.coordinate in sensory.axonal_connections}")

    if args.checkpoint:
        summary = NeuronCheckpoint.save([sensory, motor], args.checkpoint)
        print(f"Saved checkpoint: {summary['path']} ({summary['file_size']} bytes)")


if __name__ == "__main__":
    main()
