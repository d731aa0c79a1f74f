from consolelog.infra.writer.stream import StreamWriter, stderr_writer, stdout_writer

__all__ = ["StreamWriter", "stderr_writer", "stdout_writer"]
