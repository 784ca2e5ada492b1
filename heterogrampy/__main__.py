"""Main entry point for heterogrampy package."""

from loguru import logger

from heterogrampy.cli import create_parser
from heterogrampy.core import load_config
from heterogrampy.processing import run_pipeline
from heterogrampy.utils.logging import setup_logger


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load configuration
    config = load_config(args.config, args, parser)

    # Setup logging
    setup_logger(verbose=config.verbose, debug=config.debug)

    # Print startup banner
    if config.verbose:
        logger.info("=" * 60)
        logger.info("HeterogramPy - Heterogrammic Word Group Search")
        logger.info("=" * 60)
        logger.info("")

    # Validate
    if not config.has_word_source:
        parser.error("Must specify a words file, --top-n or --english-words (or several)")

    # Print configuration summary
    if config.verbose:
        logger.info("Configuration:")
        if config.words:
            logger.info(f"  Words file: {config.words}")
        if config.top_n:
            logger.info(f"  Top N words: {config.top_n}")
        if config.english_words:
            logger.info("  english-words dictionary: yes")
        logger.info(f"  Word length: {config.word_length}")
        logger.info(f"  Group size: {config.group_size}")
        logger.info(f"  Alphabet: {config.alphabet}")
        logger.info(f"  Workers: {config.jobs}")
        logger.info("")

    # Run pipeline
    try:
        run_pipeline(config)
        if config.verbose:
            logger.info("")
            logger.info("=" * 60)
            logger.info("✓ Processing completed successfully")
            logger.info("=" * 60)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise
    except Exception:
        if config.verbose:
            logger.error("")
            logger.error("=" * 60)
            logger.error("✗ Processing failed")
            logger.error("=" * 60)
        raise


if __name__ == "__main__":
    main()
