#!/usr/bin/env python3

import sys
import json
from hierarchy import CategoryTreeView, count_nodes, render_tree
from logger import get_logger

logger = get_logger()


def _load_records(services):
    """Load all categories, exiting on a missing or invalid export."""
    try:
        return services.categories.find_all()
    except FileNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Error loading categories: {e}")
        sys.exit(1)


def cmd_list(args, services):
    """List all categories in the export."""
    categories = _load_records(services)

    if not categories:
        logger.info("No categories found.")
        return

    by_id = {category.id: category for category in categories}

    logger.info("\nCategories:")
    logger.info("=" * 80)
    for category in categories:
        logger.info(f"ID: {category.id}")
        logger.info(f"Name: {category.name}")
        logger.info(f"Type: {category.label}")
        if category.description:
            logger.info(f"Description: {category.description}")
        if category.parent_id:
            parent = by_id.get(category.parent_id)
            parent_name = parent.name if parent else "Unknown"
            logger.info(f"Parent: {parent_name} (ID: {category.parent_id})")
        logger.info("-" * 80)

    logger.info(f"\nTotal categories: {len(categories)}")


def cmd_tree(args, services):
    """Print the category hierarchy as a collapsible tree."""
    records = _load_records(services)

    view = CategoryTreeView(preserve_expansion=services.config.preserve_expansion)
    view.load(records)

    if args.expand_all:
        view.expand_all()
    for category_id in args.expand or []:
        view.toggle(category_id)

    visible = view.search(args.search or "")

    if not visible:
        if view.search_term:
            logger.info(f"Aucune catégorie trouvée pour '{view.search_term}'.")
        else:
            logger.info("Aucune catégorie créée.")
        return

    for line in render_tree(visible, indent=services.config.tree_indent):
        logger.info(line)

    logger.info("")
    total = view.total
    summary = f"{total} catégorie{'s' if total > 1 else ''}"
    if view.search_term:
        summary += f", {count_nodes(visible)} affichée(s) pour '{view.search_term}'"
    logger.info(summary)


def cmd_show(args, services):
    """Show a single category by ID or name."""
    if not args.category_id and not args.name:
        logger.error("Give a category ID or --name.")
        sys.exit(1)

    _load_records(services)

    if args.name:
        category = services.categories.find_by_name(args.name)
        wanted = f"name '{args.name}'"
    else:
        category = services.categories.find(args.category_id)
        wanted = f"ID {args.category_id}"
    if not category:
        logger.error(f"Category with {wanted} not found.")
        sys.exit(1)

    if args.json:
        print(json.dumps(services.categories.to_dict(category), indent=2, ensure_ascii=False))
        return

    logger.info(f"ID: {category.id}")
    logger.info(f"Name: {category.name}")
    logger.info(f"Type: {category.label}")
    if category.description:
        logger.info(f"Description: {category.description}")
    if category.parent_id:
        logger.info(f"Parent ID: {category.parent_id}")
    if category.is_universal:
        logger.info("Scope: universal")

    children = services.categories.children_of(category.id)
    if children:
        logger.info(f"Children ({len(children)}):")
        for child in children:
            logger.info(f"  - {child.name} (ID: {child.id})")


def cmd_parents(args, services):
    """List the categories that can be picked as parent."""
    view = CategoryTreeView()
    view.load(_load_records(services))

    options = view.parent_options(exclude_id=args.exclude)
    if not options:
        logger.info("Aucune catégorie parente disponible.")
        return

    for record in options:
        logger.info(f"{record.id}\t{record.name}")


def setup_parser(subparsers):
    """Setup categories subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "categories",
        help="Browse categories",
        description="List, search and browse the external ecosystem categories",
    )
    parser.add_argument(
        "--file",
        help="Category export to read (JSON or YAML), overrides the configured one",
    )

    categories_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available category commands",
        dest="subcommand",
        required=True,
    )

    # categories list
    list_parser = categories_subparsers.add_parser("list", help="List all categories")
    list_parser.set_defaults(func=cmd_list)

    # categories tree
    tree_parser = categories_subparsers.add_parser(
        "tree", help="Print the category hierarchy"
    )
    tree_parser.add_argument(
        "--search",
        "-s",
        help="Only show categories matching this term, and their parents",
    )
    tree_parser.add_argument(
        "--expand",
        "-e",
        action="append",
        metavar="CATEGORY_ID",
        help="Toggle a branch open (repeatable, applied in order)",
    )
    tree_parser.add_argument(
        "--expand-all",
        action="store_true",
        help="Open every branch before applying --expand toggles",
    )
    tree_parser.set_defaults(func=cmd_tree)

    # categories show
    show_parser = categories_subparsers.add_parser(
        "show", help="Show a category by ID or name"
    )
    show_parser.add_argument(
        "category_id",
        nargs="?",
        help="ID of the category to show",
    )
    show_parser.add_argument(
        "--name",
        "-n",
        help="Find the category by its exact name instead of its ID",
    )
    show_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the category as JSON",
    )
    show_parser.set_defaults(func=cmd_show)

    # categories parents
    parents_parser = categories_subparsers.add_parser(
        "parents", help="List categories that can be picked as parent"
    )
    parents_parser.add_argument(
        "--exclude",
        "-x",
        metavar="CATEGORY_ID",
        help="Category being edited, left out of the options",
    )
    parents_parser.set_defaults(func=cmd_parents)
