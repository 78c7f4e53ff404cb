"""
Services for the Compass Capacity Engine.

This package contains the pure computations behind the command center.

Services:
    - Capacity Calculator: Points used/remaining and the next recommended complexity
    - Time-Budget Engine: Minutes until the hard stop and the urgency tier
    - Contextual Messaging: The one-line nudge and its action label
    - Sleep Calculator: Recommended bedtime and wind-down tips
    - Daily Schedule: Timeline mode and flow greeting
    - Energy Schedule: Scheduled energy level for the current moment
"""

from .capacity import (
    CapacityCalculator,
    CapacitySnapshot,
    TimeAdjustedCapacity,
    calculate_capacity,
    get_capacity_calculator,
    time_adjusted_capacity,
    used_capacity,
)
from .contextual_message import (
    ContextualMessage,
    MessageType,
    get_contextual_message,
)
from .daily_schedule import (
    DailySchedule,
    FlowGreeting,
    TimelineMode,
    get_flow_greeting,
    get_timeline_mode,
)
from .energy_schedule import (
    EnergyScheduleBlock,
    blocks_from_preset,
    get_current_energy_level,
)
from .sleep import (
    SleepNotification,
    SleepUrgency,
    get_sleep_notification,
    get_sleep_scenarios,
    should_show_sleep_reminder,
)
from .time_budget import (
    TimeBudget,
    TimeOfDay,
    TimeWarning,
    UrgencyLevel,
    get_time_budget,
    get_time_warning,
    time_of_day_bucket,
)

__all__ = [
    # Capacity
    "CapacityCalculator",
    "CapacitySnapshot",
    "TimeAdjustedCapacity",
    "calculate_capacity",
    "get_capacity_calculator",
    "time_adjusted_capacity",
    "used_capacity",
    # Contextual message
    "ContextualMessage",
    "MessageType",
    "get_contextual_message",
    # Daily schedule
    "DailySchedule",
    "FlowGreeting",
    "TimelineMode",
    "get_flow_greeting",
    "get_timeline_mode",
    # Energy schedule
    "EnergyScheduleBlock",
    "blocks_from_preset",
    "get_current_energy_level",
    # Sleep
    "SleepNotification",
    "SleepUrgency",
    "get_sleep_notification",
    "get_sleep_scenarios",
    "should_show_sleep_reminder",
    # Time budget
    "TimeBudget",
    "TimeOfDay",
    "TimeWarning",
    "UrgencyLevel",
    "get_time_budget",
    "get_time_warning",
    "time_of_day_bucket",
]
