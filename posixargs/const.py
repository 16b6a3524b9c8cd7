VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"

ARGV0 = "posixargs"
DESCRIPTION = "POSIX/GNU-style command-line argument parsing without a framework"

ERR_INVALID_ARG_TYPE = "ERR_INVALID_ARG_TYPE"
ERR_INVALID_ARG_VALUE = "ERR_INVALID_ARG_VALUE"
ERR_UNKNOWN_OPTION = "ERR_UNKNOWN_OPTION"
ERR_INVALID_OPTION_VALUE = "ERR_INVALID_OPTION_VALUE"
