# exception_handler.py
import logging
from typing import Dict, List, Optional, Any
from datetime import datetime
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

class ErrorSeverity(Enum):
    """错误严重程度"""
    LOW = "low"            # 单个文件被跳过，继续运行
    MEDIUM = "medium"      # 整个参数被跳过，继续运行
    CRITICAL = "critical"  # 无法创建输出文件，必须停止

class ErrorCategory(Enum):
    """错误类别"""
    USAGE = "usage"                      # 未提供任何路径参数
    PATH_NOT_FOUND = "path_not_found"    # 路径不存在
    PATH_WRONG_KIND = "path_wrong_kind"  # 既不是文件也不是目录
    OPEN = "open"                        # 打开文件失败
    READ = "read"                        # 读取文件失败
    DECODE = "decode"                    # 按检测到的编码解码失败
    WRITE = "write"                      # 写入输出文件失败
    OUTPUT = "output"                    # 创建输出文件失败

_DEFAULT_SEVERITY = {
    ErrorCategory.USAGE: ErrorSeverity.CRITICAL,
    ErrorCategory.PATH_NOT_FOUND: ErrorSeverity.MEDIUM,
    ErrorCategory.PATH_WRONG_KIND: ErrorSeverity.MEDIUM,
    ErrorCategory.OPEN: ErrorSeverity.LOW,
    ErrorCategory.READ: ErrorSeverity.LOW,
    ErrorCategory.DECODE: ErrorSeverity.LOW,
    ErrorCategory.WRITE: ErrorSeverity.LOW,
    ErrorCategory.OUTPUT: ErrorSeverity.CRITICAL,
}

@dataclass
class ErrorRecord:
    """错误记录"""
    timestamp: datetime
    error_type: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    path: Optional[str] = None

class ExceptionHandler:
    """Collects every failure reported during one run.

    Nothing here re-raises: callers report the failure and move on to the next
    file or argument. The ledger is only used to summarise the run and to
    decide the exit status in strict mode.
    """

    def __init__(self):
        self.error_records: List[ErrorRecord] = []

    def handle_exception(self,
                         exception: BaseException,
                         category: ErrorCategory,
                         path: Optional[Any] = None,
                         severity: Optional[ErrorSeverity] = None) -> ErrorRecord:
        """处理异常"""
        return self._record(
            error_type=type(exception).__name__,
            category=category,
            message=str(exception),
            path=path,
            severity=severity,
        )

    def report(self,
               category: ErrorCategory,
               message: str,
               path: Optional[Any] = None,
               severity: Optional[ErrorSeverity] = None) -> ErrorRecord:
        """Record a failure that has no underlying exception (e.g. a missing path)."""
        return self._record(
            error_type=category.value,
            category=category,
            message=message,
            path=path,
            severity=severity,
        )

    def _record(self, error_type, category, message, path, severity) -> ErrorRecord:
        error_record = ErrorRecord(
            timestamp=datetime.now(),
            error_type=error_type,
            category=category,
            severity=severity or _DEFAULT_SEVERITY[category],
            message=message,
            path=None if path is None else str(path),
        )
        self.error_records.append(error_record)

        if error_record.path is not None:
            text = f"{category.value}: {error_record.path} - {message}"
        else:
            text = f"{category.value}: {message}"

        if error_record.severity == ErrorSeverity.CRITICAL:
            logger.critical(text)
        else:
            logger.error(text)
        return error_record

    def has_failures(self) -> bool:
        return bool(self.error_records)

    def get_error_statistics(self) -> Dict:
        """获取错误统计信息"""
        category_stats = {
            category.value: len([err for err in self.error_records if err.category == category])
            for category in ErrorCategory
        }
        severity_stats = {
            severity.value: len([err for err in self.error_records if err.severity == severity])
            for severity in ErrorSeverity
        }
        return {
            'total_errors': len(self.error_records),
            'category_breakdown': category_stats,
            'severity_breakdown': severity_stats,
        }
