TRANSLATIONS = {
    "appName": "Task Manager",
    "layouts": {
        "application": {
            "users": "Users",
            "statuses": "Statuses",
            "labels": "Labels",
            "tasks": "Tasks",
            "signIn": "Login",
            "signUp": "Register",
            "signOut": "Logout",
        },
    },
    "flash": {
        "authError": "Access denied! Please login",
        "forbidden": "You cannot do that",
        "notFound": "Not found",
        "session": {
            "create": {
                "success": "You are logged in",
                "error": "Wrong email or password",
            },
            "delete": {"success": "You are logged out"},
        },
        "users": {
            "create": {
                "success": "User registered successfully",
                "error": "Failed to register",
                "emailTaken": "This email is already registered",
            },
            "edit": {"forbidden": "You cannot edit or delete another user"},
            "update": {
                "success": "User updated successfully",
                "error": "Failed to update user",
            },
            "delete": {
                "success": "User deleted successfully",
                "error": "Failed to delete user: the user has tasks",
            },
        },
        "statuses": {
            "create": {"success": "Status created successfully", "error": "Failed to create status"},
            "update": {"success": "Status updated successfully", "error": "Failed to update status"},
            "delete": {
                "success": "Status deleted successfully",
                "error": "Failed to delete status: it is used by tasks",
            },
        },
        "labels": {
            "create": {"success": "Label created successfully", "error": "Failed to create label"},
            "update": {"success": "Label updated successfully", "error": "Failed to update label"},
            "delete": {
                "success": "Label deleted successfully",
                "error": "Failed to delete label: it is attached to tasks",
            },
        },
        "tasks": {
            "create": {"success": "Task created successfully", "error": "Failed to create task"},
            "update": {"success": "Task updated successfully", "error": "Failed to update task"},
            "delete": {
                "success": "Task deleted successfully",
                "error": "Only the task's author can delete it",
            },
        },
    },
    "views": {
        "welcome": {
            "index": {
                "hello": "Hello from Task Manager!",
                "description": "Practical programming courses",
                "more": "Learn more",
            },
        },
        "errors": {
            "notFound": "Page not found",
            "serverError": "Something went wrong. We have been notified.",
        },
        "actions": {
            "edit": "Edit",
            "delete": "Delete",
            "create": "Create",
            "save": "Save",
            "show": "Show",
            "filter": "Show",
        },
        "session": {
            "new": {"title": "Login", "submit": "Login"},
        },
        "users": {
            "id": "ID",
            "fullName": "Full name",
            "firstName": "First name",
            "lastName": "Last name",
            "email": "Email",
            "password": "Password",
            "createdAt": "Created at",
            "actions": "Actions",
            "index": {"title": "Users"},
            "new": {"title": "Registration", "submit": "Save"},
            "edit": {"title": "Edit user", "submit": "Update"},
        },
        "statuses": {
            "id": "ID",
            "name": "Name",
            "createdAt": "Created at",
            "actions": "Actions",
            "index": {"title": "Statuses", "create": "Create status"},
            "new": {"title": "Create status", "submit": "Create"},
            "edit": {"title": "Edit status", "submit": "Update"},
        },
        "labels": {
            "id": "ID",
            "name": "Name",
            "createdAt": "Created at",
            "actions": "Actions",
            "index": {"title": "Labels", "create": "Create label"},
            "new": {"title": "Create label", "submit": "Create"},
            "edit": {"title": "Edit label", "submit": "Update"},
        },
        "tasks": {
            "id": "ID",
            "name": "Name",
            "description": "Description",
            "status": "Status",
            "creator": "Author",
            "executor": "Executor",
            "labels": "Labels",
            "label": "Label",
            "createdAt": "Created at",
            "actions": "Actions",
            "noExecutor": "—",
            "index": {"title": "Tasks", "create": "Create task"},
            "filter": {
                "hasLabel": "With labels only",
                "isCreatorUser": "Only my tasks",
                "any": "",
            },
            "new": {"title": "Create task", "submit": "Create"},
            "edit": {"title": "Edit task", "submit": "Update"},
        },
    },
}
