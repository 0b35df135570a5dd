from .user import (
    get_user,
    get_user_by_email,
    get_users,
    create_user,
    update_user,
    delete_user,
    authenticate_user,
)

from .status import (
    get_status,
    get_status_by_name,
    get_statuses,
    create_status,
    update_status,
    delete_status,
)

from .label import (
    get_label,
    get_label_by_name,
    get_labels,
    get_labels_by_ids,
    create_label,
    update_label,
    delete_label,
)

from .task import (
    get_task,
    get_tasks,
    create_task,
    update_task,
    delete_task,
    set_task_labels,
)
