import argparse


def build_parser():
    parser = argparse.ArgumentParser(description='Gravitational N-body simulation')
    parser.add_argument('--preset', type=str, default='solar_system', metavar='NAME',
                        help='bundled preset name or path to a preset YAML (default: solar_system)')
    parser.add_argument('--seed', type=int, default=1, metavar='N',
                        help='random seed for generated presets (default: 1)')
    parser.add_argument('--n_bodies', type=int, default=None, metavar='N',
                        help='number of bodies for the random_cluster preset')
    parser.add_argument('--steps', type=int, default=600, metavar='N',
                        help='number of steps to run in headless mode (default: 600)')
    parser.add_argument('--steps_per_frame', type=int, default=1, metavar='N',
                        help='simulation steps per animation frame (default: 1)')
    parser.add_argument('--log_interval', type=int, default=600, metavar='N',
                        help='print progress every N steps in headless mode (default: 600)')
    parser.add_argument(
        "--headless",
        action='store_true',
        help="run without a window and print a summary"
    )
    parser.add_argument(
        "--export_frame",
        type=str,
        default=None,
        help="in headless mode, save the last frame to this image path"
    )
    parser.add_argument(
        "--show_labels",
        action='store_true',
        help="draw body names next to each body"
    )
    # physics overrides; None keeps the preset value
    parser.add_argument('--dt', type=float, default=None, help='time step')
    parser.add_argument('--softening', type=float, default=None, help='softening length')
    parser.add_argument('--scale_factor', type=float, default=None, help='force scale factor')
    parser.add_argument('--width', type=float, default=None, help='wrap area width')
    parser.add_argument('--height', type=float, default=None, help='wrap area height')
    return parser

'''
usage: python scripts/main.py --preset solar_system --steps_per_frame 4 --show_labels
       python scripts/main.py --preset random_cluster --n_bodies 20 --seed 7 \
           --headless --steps 3600 --export_frame results/cluster.png
'''
