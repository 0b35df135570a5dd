TRANSLATIONS = {
    "appName": "Менеджер задач",
    "layouts": {
        "application": {
            "users": "Пользователи",
            "statuses": "Статусы",
            "labels": "Метки",
            "tasks": "Задачи",
            "signIn": "Вход",
            "signUp": "Регистрация",
            "signOut": "Выход",
        },
    },
    "flash": {
        "authError": "Доступ запрещён! Пожалуйста, авторизируйтесь.",
        "forbidden": "Недостаточно прав",
        "notFound": "Не найдено",
        "session": {
            "create": {
                "success": "Вы залогинены",
                "error": "Неправильный емейл или пароль",
            },
            "delete": {"success": "Вы разлогинены"},
        },
        "users": {
            "create": {
                "success": "Пользователь успешно зарегистрирован",
                "error": "Не удалось зарегистрировать",
                "emailTaken": "Этот емейл уже зарегистрирован",
            },
            "edit": {"forbidden": "Вы не можете редактировать или удалять другого пользователя"},
            "update": {
                "success": "Пользователь успешно изменён",
                "error": "Не удалось изменить пользователя",
            },
            "delete": {
                "success": "Пользователь успешно удалён",
                "error": "Не удалось удалить пользователя: у него есть задачи",
            },
        },
        "statuses": {
            "create": {"success": "Статус успешно создан", "error": "Не удалось создать статус"},
            "update": {"success": "Статус успешно изменён", "error": "Не удалось изменить статус"},
            "delete": {
                "success": "Статус успешно удалён",
                "error": "Не удалось удалить статус: он используется в задачах",
            },
        },
        "labels": {
            "create": {"success": "Метка успешно создана", "error": "Не удалось создать метку"},
            "update": {"success": "Метка успешно изменена", "error": "Не удалось изменить метку"},
            "delete": {
                "success": "Метка успешно удалена",
                "error": "Не удалось удалить метку: она привязана к задачам",
            },
        },
        "tasks": {
            "create": {"success": "Задача успешно создана", "error": "Не удалось создать задачу"},
            "update": {"success": "Задача успешно изменена", "error": "Не удалось изменить задачу"},
            "delete": {
                "success": "Задача успешно удалена",
                "error": "Задачу может удалить только её автор",
            },
        },
    },
    "views": {
        "welcome": {
            "index": {
                "hello": "Привет от Менеджера задач!",
                "description": "Практические курсы по программированию",
                "more": "Узнать больше",
            },
        },
        "errors": {
            "notFound": "Страница не найдена",
            "serverError": "Что-то пошло не так. Мы уже в курсе.",
        },
        "actions": {
            "edit": "Изменить",
            "delete": "Удалить",
            "create": "Создать",
            "save": "Сохранить",
            "show": "Показать",
            "filter": "Показать",
        },
        "session": {
            "new": {"title": "Вход", "submit": "Войти"},
        },
        "users": {
            "id": "ID",
            "fullName": "Полное имя",
            "firstName": "Имя",
            "lastName": "Фамилия",
            "email": "Email",
            "password": "Пароль",
            "createdAt": "Дата создания",
            "actions": "Действия",
            "index": {"title": "Пользователи"},
            "new": {"title": "Регистрация", "submit": "Сохранить"},
            "edit": {"title": "Изменение пользователя", "submit": "Изменить"},
        },
        "statuses": {
            "id": "ID",
            "name": "Наименование",
            "createdAt": "Дата создания",
            "actions": "Действия",
            "index": {"title": "Статусы", "create": "Создать статус"},
            "new": {"title": "Создание статуса", "submit": "Создать"},
            "edit": {"title": "Изменение статуса", "submit": "Изменить"},
        },
        "labels": {
            "id": "ID",
            "name": "Наименование",
            "createdAt": "Дата создания",
            "actions": "Действия",
            "index": {"title": "Метки", "create": "Создать метку"},
            "new": {"title": "Создание метки", "submit": "Создать"},
            "edit": {"title": "Изменение метки", "submit": "Изменить"},
        },
        "tasks": {
            "id": "ID",
            "name": "Наименование",
            "description": "Описание",
            "status": "Статус",
            "creator": "Автор",
            "executor": "Исполнитель",
            "labels": "Метки",
            "label": "Метка",
            "createdAt": "Дата создания",
            "actions": "Действия",
            "noExecutor": "—",
            "index": {"title": "Задачи", "create": "Создать задачу"},
            "filter": {
                "hasLabel": "Только с метками",
                "isCreatorUser": "Только мои задачи",
                "any": "",
            },
            "new": {"title": "Создание задачи", "submit": "Создать"},
            "edit": {"title": "Изменение задачи", "submit": "Изменить"},
        },
    },
}
