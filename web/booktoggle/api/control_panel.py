"""Static HTML control panel served at GET /"""

CONTROL_PANEL_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Books On/Off</title>
  <meta name="viewport" content="width=device-width,initial-scale=1" />
  <style>
    :root{--on:#16a34a;--off:#ef4444;--muted:#6b7280;--bg:#f8fafc;font-family:Inter,system-ui,Segoe UI,Arial}
    body{background:var(--bg);color:#111;margin:0;padding:40px;display:flex;justify-content:center}
    .panel{background:#fff;border-radius:12px;padding:24px;box-shadow:0 6px 18px rgba(2,6,23,0.08);width:560px}
    h1{margin:0 0 8px;font-size:20px}
    .state{display:flex;align-items:center;gap:12px;margin-top:8px}
    .badge{padding:6px 12px;border-radius:999px;font-weight:600;color:#fff}
    .badge.on{background:var(--on)}
    .badge.off{background:var(--off)}
    .count{color:var(--muted);font-size:14px}
    .actions{display:flex;gap:12px;margin-top:18px}
    button{flex:1;padding:12px;border-radius:8px;border:0;font-weight:700;cursor:pointer}
    button.on{background:linear-gradient(90deg,#34d399,#059669);color:#023}
    button.off{background:linear-gradient(90deg,#fda4af,#ef4444);color:#4b0505}
    button[disabled]{opacity:0.5;cursor:not-allowed}
    .toast{position:fixed;right:20px;bottom:20px;background:#111;color:#fff;padding:10px 14px;border-radius:8px;opacity:0;transform:translateY(8px);transition:all .25s}
    .toast.show{opacity:1;transform:translateY(0)}
  </style>
</head>
<body>
  <div class="panel">
    <h1>Books Collection</h1>
    <div class="state">
      <div id="badge" class="badge off">OFF</div>
      <div class="count">Current count: <strong id="count">0</strong></div>
    </div>
    <div class="actions">
      <button id="onBtn" class="on">Turn On</button>
      <button id="offBtn" class="off">Turn Off</button>
    </div>
  </div>
  <div id="toast" class="toast"></div>

  <script>
    const badge = document.getElementById('badge');
    const countEl = document.getElementById('count');
    const onBtn = document.getElementById('onBtn');
    const offBtn = document.getElementById('offBtn');
    const toastEl = document.getElementById('toast');

    function showToast(msg, isError=false){
      toastEl.textContent = msg;
      toastEl.style.background = isError ? '#b91c1c' : '#111';
      toastEl.classList.add('show');
      setTimeout(()=>toastEl.classList.remove('show'), 3000);
    }

    async function getStatus(){
      try{
        const res = await fetch('/status');
        return await res.json();
      }catch(e){ return { count: 0 }; }
    }

    function render(data){
      const c = data.count || 0;
      const on = c > 0;
      countEl.textContent = c;
      badge.textContent = on ? 'ON' : 'OFF';
      badge.className = 'badge ' + (on ? 'on' : 'off');
      onBtn.disabled = on;
      offBtn.disabled = !on;
    }

    async function postAction(path){
      try{
        const res = await fetch(path, { method: 'POST' });
        const body = await res.json().catch(()=>({ message: res.statusText }));
        if (!res.ok) { showToast(body.error || body.message || 'Action failed', true); return; }
        showToast(body.message
          || (body.insertedCount && (body.insertedCount + ' inserted'))
          || (body.deletedCount && (body.deletedCount + ' deleted')));
        render(await getStatus());
      }catch(e){ showToast(e.message, true); }
    }

    onBtn.addEventListener('click', ()=> postAction('/on'));
    offBtn.addEventListener('click', ()=> postAction('/off'));
    getStatus().then(render);
  </script>
</body>
</html>
"""
