import sys

usage = """usage: slugline [--conf FILE] [--verbose] [--report] INPUT [OUTPUT]

Converts between native (.slg), Final Draft (.fdx) and PDF (.pdf) files,
picking formats by file extension. PDF can only be written."""

# parse command line 'argv' (sys.argv if None) into module globals.
# returns False if the command line is not usable, in which case 'err'
# says why.
def init(argv = None):
    global conf, verbose, report, filenames, err

    if argv is None:
        argv = sys.argv

    # script filenames, input first
    filenames = []

    # name of config file to use, or None
    conf = None

    # log debug messages
    verbose = False

    # print reports about the input file
    report = False

    err = None

    i = 1
    while i < len(argv):
        arg = str(argv[i])

        if arg == "--conf":
            if (i + 1) < len(argv):
                conf = str(argv[i + 1])
                i += 1
            else:
                err = "--conf needs a filename"
        elif arg in ("-v", "--verbose"):
            verbose = True
        elif arg == "--report":
            report = True
        elif arg.startswith("-"):
            err = "unknown option '%s'" % arg
        else:
            filenames.append(arg)

        i += 1

    if not err:
        if not filenames:
            err = "no input file given"
        elif len(filenames) > 2:
            err = "too many filenames"
        elif (len(filenames) == 1) and not report:
            err = "nothing to do, give an output file or --report"

    return err is None
