import logging
import sys

import slugline
import slugline.config as config
import slugline.error as error
import slugline.fileio as fileio
import slugline.opts as opts
import slugline.reports as reports

import structlog

log = structlog.get_logger(__name__)

# loggers write to whatever sys.stderr is when they are created, which is
# on every call since loggers are not cached
def _stderrLogger(*args):
    return structlog.PrintLogger(sys.stderr)

# set up logging to stderr. only warnings and worse are shown unless
# 'verbose' is True.
def configureLogging(verbose = False):
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    structlog.configure(
        processors = [
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt = "%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors = False),
        ],
        wrapper_class = structlog.make_filtering_bound_logger(level),
        logger_factory = _stderrLogger,
        cache_logger_on_first_use = False,
    )

# run the program with command line 'argv' (sys.argv if None) and return
# the process exit code.
def main(argv = None):
    if not opts.init(argv):
        print("slugline: %s\n\n%s" % (opts.err, opts.usage), file = sys.stderr)

        return 2

    configureLogging(opts.verbose)

    log.debug("starting", version = slugline.version)

    try:
        if opts.conf:
            cfg = config.loadFromFile(opts.conf)
        else:
            cfg = config.Config()

        sp = fileio.importFile(opts.filenames[0])

        if opts.report:
            print(reports.generateAll(sp, cfg))

        if len(opts.filenames) > 1:
            fileio.exportFile(sp, opts.filenames[1], cfg)

    except error.SluglineError as e:
        print("slugline: %s" % e, file = sys.stderr)

        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
