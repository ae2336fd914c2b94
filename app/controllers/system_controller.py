import os
import time
import logging
import psutil

logger = logging.getLogger(__name__)

class SystemController:
    """Process monitor: host and panel process resource usage."""

    def get_system_stats(self):
        """Get system stats for real-time monitoring"""
        try:
            cpu_percent = psutil.cpu_percent(interval=0.1)

            memory = psutil.virtual_memory()
            memory_used_mb = memory.used // (1024 * 1024)
            memory_total_mb = memory.total // (1024 * 1024)

            panel = psutil.Process(os.getpid())
            panel_rss_mb = panel.memory_info().rss // (1024 * 1024)

            uptime_seconds = int(time.time() - psutil.boot_time())

            return {
                "cpu": round(cpu_percent, 1),
                "memory_used": memory_used_mb,
                "memory_total": memory_total_mb,
                "panel_rss_mb": panel_rss_mb,
                "uptime": uptime_seconds
            }
        except psutil.Error as e:
            logger.error(f"Error getting system stats: {e}")
            return {
                "cpu": 0,
                "memory_used": 0,
                "memory_total": 1,
                "panel_rss_mb": 0,
                "uptime": 0
            }
