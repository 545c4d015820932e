from stylescope.driver.base import Driver, EventHandler

__all__ = ["Driver", "EventHandler"]
