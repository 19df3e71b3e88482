import subprocess
from ..cli_logger import logger

def run_shell_command(command, env=None, cwd=None):
    """
    Executes a shell command string and streams its combined output.

    The string is handed to the shell unparsed, so pipes, subshells and
    `&&` chains behave exactly as they would in a terminal.

    Args:
        command (str): The command line to execute.
        env (dict, optional): A dictionary of environment variables.
        cwd (str, optional): The working directory for the command.

    Returns:
        A tuple (generator of output lines, process). The process carries
        its returncode once the generator is exhausted.
    """
    try:
        process = subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            bufsize=1,
            universal_newlines=True,
            env=env,
            cwd=cwd
        )
    except OSError as e:
        logger.error(f"Could not start command '{command}': {e}")
        return iter([]), type('obj', (object,), {'returncode': -1})

    def _generator():
        for line in process.stdout:
            yield line
        process.communicate()
    return _generator(), process

def run_commands(commands, cwd=None, env=None):
    """Run a command pipeline in order, stopping at the first failure.

    Returns True if every command exited with status 0.
    """
    for index, command in enumerate(commands, start=1):
        logger.info(f"[{index}/{len(commands)}] $ {command}")
        output, process = run_shell_command(command, env=env, cwd=cwd)
        for line in output:
            logger.step_info(line.rstrip(), indent=2)
        if process.returncode != 0:
            logger.error(f"Command '{command}' failed with exit code {process.returncode}.")
            return False
    logger.success(f"Ran {len(commands)} command(s) successfully.")
    return True
