import logging  # pylint: disable=W0403
logger = logging.getLogger(__name__)

WAIT_TIME = 120


def get_output(process):
    """Returns the stdout of an `infi.execute` result as text"""
    output = process.get_stdout()
    if isinstance(output, bytes):
        output = output.decode("utf-8", "replace")
    return output


def execute_command(cmd, check_returncode=True, timeout=WAIT_TIME):
    from infi.execute import execute_async, ExecutionError
    logger.info("executing {}".format(cmd))
    process = execute_async(cmd, timeout=timeout)
    process.wait()
    logger.info("execution of cmd {} (pid {}) returned {}".format(cmd, process.get_pid(), process.get_returncode()))
    logger.debug("stdout: {}".format(process.get_stdout()))
    logger.debug("stderr: {}".format(process.get_stderr()))
    if check_returncode and process.get_returncode() != 0:
        raise ExecutionError(process)
    return process
