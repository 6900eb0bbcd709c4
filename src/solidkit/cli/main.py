"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Output formatting and error reporting
"""
import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from solidkit import __version__
from solidkit.application.principles import Variant
from solidkit.bootstrap import Application, create_application
from solidkit.cli.formatters import format_output
from solidkit.config.schemas import PersistenceConfig
from solidkit.domain.base.exceptions import DomainException, ValidationError
from solidkit.domain.birds import Bird, Duck, Ostrich, release_flock
from solidkit.domain.orders import Order
from solidkit.domain.shapes import AreaCalculator, available_shapes, shape_from_dict
from solidkit.domain.workers import (
    HumanWorker,
    RobotWorker,
    capabilities_of,
    lunch_break,
    night_break,
    run_shift,
)
from solidkit.infrastructure.logging.logger import get_logger

FORMATS = ['json', 'yaml', 'table', 'list']

BIRD_SPECIES: Dict[str, Callable[[str], Bird]] = {
    'duck': Duck,
    'ostrich': Ostrich,
}

WORKER_KINDS = {
    'human': HumanWorker,
    'robot': RobotWorker,
}

WORKER_ACTIONS = {
    'shift': run_shift,
    'lunch': lunch_break,
    'night': night_break,
}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments with resource-action structure."""

    parser = argparse.ArgumentParser(
        prog='solidkit',
        description="SOLID design principles as runnable before/after examples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s principles list                         # List the five principles
  %(prog)s principles show lsp --variant both      # Run both LSP demos
  %(prog)s shapes area circle radius=2             # Area of one shape
  %(prog)s shapes total circle:radius=1 rectangle:width=2,height=3
  %(prog)s birds release duck:Donald duck:Daisy    # Fly a flock
  %(prog)s workers lunch human:Bob                 # Lunch break
  %(prog)s orders place A-1 Alice 42.5 --backend postgresql
        """
    )

    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMATS, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='resource', help='Available resources')

    # Principles resource
    principles_parser = subparsers.add_parser('principles', help='Browse and run principle demos')
    principles_subparsers = principles_parser.add_subparsers(dest='action', help='Principle actions')
    principles_subparsers.add_parser('list', help='List all principles')
    principles_show = principles_subparsers.add_parser('show', help='Run the demos of one principle')
    principles_show.add_argument('code', help='Principle code, e.g. SRP')
    principles_show.add_argument('--variant', choices=['violating', 'compliant', 'both'],
                                 default='both', help='Which demo to run')

    # Shapes resource
    shapes_parser = subparsers.add_parser('shapes', help='Shape area calculations')
    shapes_subparsers = shapes_parser.add_subparsers(dest='action', help='Shape actions')
    shapes_subparsers.add_parser('list', help='List known shape types')
    shapes_area = shapes_subparsers.add_parser('area', help='Area of one shape')
    shapes_area.add_argument('shape_type', help='Shape type, e.g. circle')
    shapes_area.add_argument('dimensions', nargs='+', help='Dimensions as key=value')
    shapes_total = shapes_subparsers.add_parser('total', help='Total area of several shapes')
    shapes_total.add_argument('shapes', nargs='+', help='Shapes as type:key=value,key=value')

    # Birds resource
    birds_parser = subparsers.add_parser('birds', help='Bird flock operations')
    birds_subparsers = birds_parser.add_subparsers(dest='action', help='Bird actions')
    birds_release = birds_subparsers.add_parser('release', help='Ask a flock to fly')
    birds_release.add_argument('birds', nargs='+', help='Birds as species:name')

    # Workers resource
    workers_parser = subparsers.add_parser('workers', help='Worker group operations')
    workers_subparsers = workers_parser.add_subparsers(dest='action', help='Worker actions')
    for action, help_text in (('shift', 'Run a work shift'),
                              ('lunch', 'Send workers to lunch'),
                              ('night', 'Send workers to sleep')):
        workers_action = workers_subparsers.add_parser(action, help=help_text)
        workers_action.add_argument('workers', nargs='+', help='Workers as kind:name')

    # Orders resource
    orders_parser = subparsers.add_parser('orders', help='Order placement')
    orders_subparsers = orders_parser.add_subparsers(dest='action', help='Order actions')
    orders_place = orders_subparsers.add_parser('place', help='Place an order')
    orders_place.add_argument('order_id', help='Order ID')
    orders_place.add_argument('customer', help='Customer name')
    orders_place.add_argument('amount', type=float, help='Order amount')
    orders_place.add_argument('--backend', help='Database backend, overrides configuration')

    return parser.parse_args(argv)


def _split_pair(text: str, separator: str) -> Tuple[str, str]:
    key, sep, value = text.partition(separator)
    if not sep or not key or not value:
        raise ValidationError(f"Expected KEY{separator}VALUE, got '{text}'")
    return key.strip(), value.strip()


def _parse_dimensions(pairs: List[str]) -> Dict[str, float]:
    dimensions = {}
    for pair in pairs:
        key, value = _split_pair(pair, '=')
        try:
            dimensions[key] = float(value)
        except ValueError as e:
            raise ValidationError(f"Dimension {key} must be a number, got '{value}'") from e
    return dimensions


def _parse_shape(text: str) -> Dict[str, Any]:
    shape_type, dimensions = _split_pair(text, ':')
    return {'type': shape_type, **_parse_dimensions(dimensions.split(','))}


def _build_members(specs: List[str], kinds: Dict[str, Callable[[str], Any]], what: str) -> List[Any]:
    members = []
    for spec in specs:
        kind, name = _split_pair(spec, ':')
        if kind.lower() not in kinds:
            raise ValidationError(
                f"Unknown {what} '{kind}'. Known: {', '.join(sorted(kinds))}"
            )
        members.append(kinds[kind.lower()](name))
    return members


def handle_principles(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    if args.action == 'list':
        return {'principles': [principle.to_dict() for principle in app.catalog]}

    principle = app.catalog.get(args.code)
    result: Dict[str, Any] = principle.to_dict()
    variants = [Variant.VIOLATING, Variant.COMPLIANT] if args.variant == 'both' else [Variant(args.variant)]
    for variant in variants:
        result[variant.value] = principle.run(variant)
    return result


def handle_shapes(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    calculator = AreaCalculator()
    if args.action == 'list':
        return {'shapes': available_shapes()}
    if args.action == 'area':
        shape = shape_from_dict({'type': args.shape_type, **_parse_dimensions(args.dimensions)})
        return {'shape': shape.kind, 'area': calculator.area(shape)}

    shapes = [shape_from_dict(_parse_shape(text)) for text in args.shapes]
    return {
        'shapes': [{'shape': shape.kind, 'area': calculator.area(shape)} for shape in shapes],
        'total_area': calculator.total_area(shapes),
    }


def handle_birds(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    flock = _build_members(args.birds, BIRD_SPECIES, 'bird species')
    return {'flight': release_flock(flock)}


def handle_workers(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    workers = _build_members(args.workers, WORKER_KINDS, 'worker kind')
    return {
        args.action: WORKER_ACTIONS[args.action](workers),
        'capabilities': [
            {'name': worker.name, 'capabilities': ', '.join(sorted(capabilities_of(worker)))}
            for worker in workers
        ],
    }


def handle_orders(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    if args.backend:
        persistence = app.config.persistence.model_dump()
        persistence["backend"] = args.backend
        app.config.persistence = PersistenceConfig(**persistence)
    service = app.order_service()
    order = Order(order_id=args.order_id, customer=args.customer, amount=args.amount)
    confirmation = service.place_order(order)
    return {
        'order_id': order.order_id,
        'backend': service.database.name,
        'confirmation': confirmation,
    }


HANDLERS: Dict[str, Callable[[argparse.Namespace, Application], Dict[str, Any]]] = {
    'principles': handle_principles,
    'shapes': handle_shapes,
    'birds': handle_birds,
    'workers': handle_workers,
    'orders': handle_orders,
}


def execute_command(args: argparse.Namespace, app: Application) -> Dict[str, Any]:
    return HANDLERS[args.resource](args, app)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)

    if not args.resource:
        print("Error: No resource specified. Use --help for usage information.", file=sys.stderr)
        sys.exit(1)

    if not args.action:
        print(f"Error: No action specified for {args.resource}. Use --help for usage information.",
              file=sys.stderr)
        sys.exit(1)

    logger = get_logger(__name__)

    try:
        app = create_application(args.config, args.log_level)
        result = execute_command(args, app)
        output_format = args.format or app.config.output_format
        print(format_output(result, output_format))
    except DomainException as e:
        logger.error(f"Domain error: {e}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
