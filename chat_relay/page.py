INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Local LLM Chat</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        #log { border: 1px solid #ddd; height: 400px; overflow-y: auto; padding: 10px; margin-bottom: 10px; }
        .row { display: flex; gap: 10px; }
        #prompt { flex: 1; padding: 10px; }
        button { padding: 10px 20px; }
        .msg { margin: 10px 0; padding: 10px; border-radius: 5px; white-space: pre-wrap; }
        .user { background: #e3f2fd; }
        .assistant { background: #f1f8e9; }
        .error { background: #ffebee; }
    </style>
</head>
<body>
    <h1>Local LLM Chat</h1>
    <div id="log"></div>
    <div class="row">
        <input type="text" id="prompt" placeholder="Ask something...">
        <button id="send">Send</button>
    </div>
    <script>
        const log = document.getElementById('log');
        const input = document.getElementById('prompt');

        function append(kind, text) {
            const div = document.createElement('div');
            div.className = 'msg ' + kind;
            div.textContent = (kind === 'user' ? 'You: ' : 'Model: ') + text;
            log.appendChild(div);
            log.scrollTop = log.scrollHeight;
        }

        async function send() {
            const prompt = input.value.trim();
            if (!prompt) return;
            append('user', prompt);
            input.value = '';
            try {
                const res = await fetch('/chat', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify({ prompt: prompt })
                });
                if (res.ok) {
                    const data = await res.json();
                    append('assistant', data.response);
                } else {
                    const text = await res.text();
                    append('error', text || res.statusText);
                }
            } catch (err) {
                append('error', 'Error: ' + err.message);
            }
        }

        document.getElementById('send').addEventListener('click', send);
        input.addEventListener('keypress', (e) => { if (e.key === 'Enter') send(); });
    </script>
</body>
</html>
"""
